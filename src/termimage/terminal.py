import os
import sys


def get_terminal_size() -> tuple[int, int] | None:
    """Return (columns, rows) of the terminal, or None if it can't be determined."""
    if not sys.stdout.isatty():
        return None
    try:
        size = os.get_terminal_size()
    except OSError:
        return None
    if not (size.columns and size.lines):
        return None
    return (size.columns, size.lines)
