import argparse
import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path


class AnsiOutputFormat(enum.Enum):
    TRUECOLOR = "truecolor"
    SIMPLE_BLACK = "simple-black"
    SIMPLE_WHITE = "simple-white"
    ASCII = "ascii"


@dataclass
class Options:
    # Display name as the user typed it, and the resolved path
    image: tuple[str, Path]
    size: tuple[int, int]
    preserve_aspect: bool = True
    # None draws through the platform console instead of writing escapes
    ansi_out: AnsiOutputFormat | None = AnsiOutputFormat.TRUECOLOR
    verbose: bool = False


_SIZE_RE = re.compile(r"^(\d+)[xX](\d+)$")


def parse_size(s: str) -> tuple[int, int]:
    """Parse "NNNxMMM" into (columns, rows)."""
    match = _SIZE_RE.match(s.strip())
    if match is None:
        raise argparse.ArgumentTypeError(f'"{s}" is not a valid size (in format "NNNxMMM")')
    size = (int(match.group(1)), int(match.group(2)))
    if 0 in size:
        raise argparse.ArgumentTypeError("Can't resize image to size 0")
    return size


def image_file(s: str) -> str:
    if not Path(s).exists():
        raise argparse.ArgumentTypeError(f'Image file "{s}" not found')
    return s


def build_parser(term_size: tuple[int, int] | None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termimage", description="Display an image in the terminal")
    parser.add_argument("image", metavar="IMAGE", type=image_file, help="Image file to display")
    if term_size is not None:
        columns, rows = term_size
        # Leave a line for the prompt
        default = f"{columns}x{max(rows - 1, 1)}"
        parser.add_argument(
            "-s",
            "--size",
            metavar="NxM",
            type=parse_size,
            default=parse_size(default),
            help=f"Image size to display (default: {default})",
        )
    else:
        parser.add_argument("-s", "--size", metavar="NxM", type=parse_size, required=True, help="Image size to display")
    parser.add_argument(
        "-f", "--force", action="store_true", default=False, help="Don't preserve the image's aspect ratio"
    )
    parser.add_argument(
        "-a",
        "--ansi",
        choices=[f.value for f in AnsiOutputFormat],
        default=None,
        help="Force ANSI output of the given kind (default: truecolor)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def parse_options(
    argv: list[str] | None = None,
    term_size: tuple[int, int] | None = None,
    windows: bool = os.name == "nt",
) -> Options:
    """Parse command-line arguments, defaulting the size to `term_size` when it is known."""
    args = build_parser(term_size).parse_args(argv)

    # Without ANSI support the Windows console is drawn into directly, unless escapes were asked for
    if windows and term_size is not None and args.ansi is None:
        ansi_out = None
    else:
        ansi_out = AnsiOutputFormat(args.ansi or AnsiOutputFormat.TRUECOLOR.value)

    return Options(
        image=(args.image, Path(args.image).resolve()),
        size=args.size,
        preserve_aspect=not args.force,
        ansi_out=ansi_out,
        verbose=args.verbose,
    )
