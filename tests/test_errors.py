import io

from termimage.errors import FormatGuessFailed, OpenFailed, TermImageError


def test_messages():
    assert str(FormatGuessFailed("not_image.rs")) == 'Failed to guess format of "not_image.rs".'
    assert str(OpenFailed("cat.png")) == 'Failed to open image file "cat.png".'


def test_exit_values_are_distinct():
    assert FormatGuessFailed("").exit_value == 1
    assert OpenFailed("").exit_value == 2


def test_print_error():
    out = io.StringIO()
    FormatGuessFailed("not_image.rs").print_error(out)
    assert out.getvalue() == 'Failed to guess format of "not_image.rs".\n'


def test_common_base():
    for error in (FormatGuessFailed("a"), OpenFailed("a")):
        assert isinstance(error, TermImageError)
        assert error.name == "a"
