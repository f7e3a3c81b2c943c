import pytest
from PIL import Image

from termimage.errors import FormatGuessFailed, OpenFailed
from termimage.escapes import BMP_MAGIC, GIF_MAGIC, ICO_MAGIC, JPEG_MAGIC, PNG_MAGIC
from termimage.formats import EXTENSIONS, ImageFormat, guess_format, load_image


@pytest.mark.parametrize("extension", sorted(EXTENSIONS))
def test_extension_is_enough(tmp_path, extension):
    path = tmp_path / f"missing.{extension}"
    assert guess_format(("missing", path)) is EXTENSIONS[extension]


def test_extension_is_case_insensitive(tmp_path):
    assert guess_format(("x", tmp_path / "PHOTO.JPEG")) is ImageFormat.JPEG
    assert guess_format(("x", tmp_path / "scan.Tif")) is ImageFormat.TIFF


def test_jpeg_aliases():
    for extension in ("jpg", "jpeg", "jpe", "jif", "jfif", "jfi"):
        assert EXTENSIONS[extension] is ImageFormat.JPEG


def test_extension_wins_over_contents(tmp_path):
    path = tmp_path / "actually_a_png.gif"
    path.write_bytes(PNG_MAGIC + b"\x00" * 24)
    assert guess_format(("x", path)) is ImageFormat.GIF


@pytest.mark.parametrize(
    "magic, expected",
    [
        (PNG_MAGIC, ImageFormat.PNG),
        (JPEG_MAGIC, ImageFormat.JPEG),
        (GIF_MAGIC, ImageFormat.GIF),
        (BMP_MAGIC, ImageFormat.BMP),
        (ICO_MAGIC, ImageFormat.ICO),
    ],
)
def test_magic_bytes_without_extension(tmp_path, magic, expected):
    path = tmp_path / "image"
    path.write_bytes(magic + b"\x00" * 40)
    assert guess_format(("image", path)) is expected


def test_magic_bytes_with_unknown_extension(tmp_path):
    path = tmp_path / "image.dat"
    path.write_bytes(PNG_MAGIC)
    assert guess_format(("image.dat", path)) is ImageFormat.PNG


def test_short_file_matches_short_magic(tmp_path):
    path = tmp_path / "tiny"
    path.write_bytes(b"BM")
    assert guess_format(("tiny", path)) is ImageFormat.BMP


def test_unrecognised_contents(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("just some text, not an image")
    with pytest.raises(FormatGuessFailed, match='Failed to guess format of "notes.txt"'):
        guess_format(("notes.txt", path))


def test_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    with pytest.raises(FormatGuessFailed):
        guess_format(("empty", path))


def test_missing_file_without_extension(tmp_path):
    with pytest.raises(OpenFailed, match='Failed to open image file "nowhere"'):
        guess_format(("nowhere", tmp_path / "nowhere"))


def test_load_image(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGB", (3, 2), (255, 0, 0)).save(path)
    img = load_image(("red.png", path), ImageFormat.PNG)
    assert img.size == (3, 2)
    assert img.convert("RGB").getpixel((0, 0)) == (255, 0, 0)


def test_load_image_without_extension(tmp_path):
    path = tmp_path / "picture"
    Image.new("RGB", (4, 4), (0, 0, 255)).save(path, format="BMP")
    file = ("picture", path)
    img = load_image(file, guess_format(file))
    assert img.size == (4, 4)


def test_load_image_wrong_format_is_open_failure(tmp_path):
    path = tmp_path / "fake.png"
    Image.new("RGB", (4, 4)).save(path, format="BMP")
    with pytest.raises(OpenFailed, match="fake.png"):
        load_image(("fake.png", path), ImageFormat.PNG)


def test_load_image_garbage(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(PNG_MAGIC + b"garbage")
    with pytest.raises(OpenFailed):
        load_image(("broken.png", path), ImageFormat.PNG)


def test_load_missing_image(tmp_path):
    with pytest.raises(OpenFailed, match="gone.png"):
        load_image(("gone.png", tmp_path / "gone.png"), ImageFormat.PNG)


def test_hdr_cannot_be_decoded(tmp_path):
    path = tmp_path / "sky.hdr"
    path.write_bytes(b"#?RADIANCE\n")
    with pytest.raises(OpenFailed):
        load_image(("sky.hdr", path), ImageFormat.HDR)
