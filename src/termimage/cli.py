import logging
import sys

from termimage.converter import display_image
from termimage.errors import TermImageError
from termimage.options import parse_options
from termimage.terminal import get_terminal_size


def main(argv: list[str] | None = None):
    opts = parse_options(argv, term_size=get_terminal_size())

    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        display_image(
            sys.stdout,
            opts.image,
            opts.size,
            preserve_aspect=opts.preserve_aspect,
            ansi_out=opts.ansi_out,
        )
    except TermImageError as e:
        logging.getLogger(__name__).debug("Aborting: %r", e.__cause__)
        e.print_error(sys.stderr)
        sys.exit(e.exit_value)
    sys.stdout.flush()
