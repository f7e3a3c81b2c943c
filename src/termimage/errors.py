from typing import TextIO


class TermImageError(Exception):
    """Base for failures that abort rendering. Each kind maps to its own process exit value."""

    exit_value = 1
    template = "{!r}"

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return self.template.format(self.name)

    def print_error(self, out: TextIO) -> None:
        print(self, file=out)


class FormatGuessFailed(TermImageError):
    """Neither the extension nor the magic bytes identified a supported format."""

    exit_value = 1
    template = 'Failed to guess format of "{}".'


class OpenFailed(TermImageError):
    """The image file could not be opened or decoded."""

    exit_value = 2
    template = 'Failed to open image file "{}".'
