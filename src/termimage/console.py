"""Drawing into the Windows console by setting cell attributes directly.

The console keeps a 16-entry colour table, and every cell carries a
foreground nibble and a background nibble indexing into it. After printing
a block of half-block glyphs, each cell's attribute is pointed at the
palette entries closest to its upper and lower pixels.

On other platforms ConsoleGridRenderer writes nothing.
"""

import os
from typing import TextIO

from PIL import Image

from termimage.colours import create_colourtable
from termimage.escapes import HALF_BLOCK

STD_OUTPUT_HANDLE = -11


def colorref_to_rgb(colorref: int) -> tuple[int, int, int]:
    """COLORREF values are laid out as 0x00BBGGRR."""
    return (colorref & 0xFF, (colorref >> 8) & 0xFF, (colorref >> 16) & 0xFF)


def console_attribute(base: int, upper: int, lower: int) -> int:
    """Keep the high byte of the current attributes, foreground in bits 0-3 and background in bits 4-7."""
    return (base & 0xFF00) | (lower << 4) | upper


def half_block_fill(width: int, rows: int) -> str:
    return (HALF_BLOCK * width + "\n") * rows


class NullConsoleRenderer:
    """No console to draw into outside Windows, so there is no output."""

    def write(self, out: TextIO, image: Image.Image) -> None:
        pass


if os.name == "nt":
    import ctypes
    from ctypes import wintypes

    class COORD(ctypes.Structure):
        _fields_ = [("X", wintypes.SHORT), ("Y", wintypes.SHORT)]

    class SMALL_RECT(ctypes.Structure):
        _fields_ = [
            ("Left", wintypes.SHORT),
            ("Top", wintypes.SHORT),
            ("Right", wintypes.SHORT),
            ("Bottom", wintypes.SHORT),
        ]

    class CONSOLE_SCREEN_BUFFER_INFOEX(ctypes.Structure):
        _fields_ = [
            ("cbSize", wintypes.ULONG),
            ("dwSize", COORD),
            ("dwCursorPosition", COORD),
            ("wAttributes", wintypes.WORD),
            ("srWindow", SMALL_RECT),
            ("dwMaximumWindowSize", COORD),
            ("wPopupAttributes", wintypes.WORD),
            ("bFullscreenSupported", wintypes.BOOL),
            ("ColorTable", wintypes.DWORD * 16),
        ]

    # Own handle so the signatures below don't leak into other users of windll.kernel32
    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    kernel32.GetStdHandle.argtypes = [wintypes.DWORD]
    kernel32.GetStdHandle.restype = wintypes.HANDLE
    kernel32.GetConsoleScreenBufferInfoEx.argtypes = [wintypes.HANDLE, ctypes.POINTER(CONSOLE_SCREEN_BUFFER_INFOEX)]
    kernel32.GetConsoleScreenBufferInfoEx.restype = wintypes.BOOL
    kernel32.FillConsoleOutputAttribute.argtypes = [
        wintypes.HANDLE,
        wintypes.WORD,
        wintypes.DWORD,
        COORD,
        wintypes.LPDWORD,
    ]
    kernel32.FillConsoleOutputAttribute.restype = wintypes.BOOL

    class WindowsConsoleRenderer:
        def write(self, out: TextIO, image: Image.Image) -> None:
            term_h = image.height // 2
            out.write(half_block_fill(image.width, term_h))
            out.flush()

            handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE & 0xFFFFFFFF)
            info = CONSOLE_SCREEN_BUFFER_INFOEX()
            info.cbSize = ctypes.sizeof(CONSOLE_SCREEN_BUFFER_INFOEX)
            if not kernel32.GetConsoleScreenBufferInfoEx(handle, ctypes.byref(info)):
                raise ctypes.WinError(ctypes.get_last_error())
            colours = [colorref_to_rgb(cr) for cr in info.ColorTable]

            written = wintypes.DWORD()
            for y, line in enumerate(create_colourtable(image, colours, colours)):
                row = info.dwCursorPosition.Y - (term_h - y)
                for x, (upper, lower) in enumerate(line):
                    kernel32.FillConsoleOutputAttribute(
                        handle,
                        console_attribute(info.wAttributes, upper, lower),
                        1,
                        COORD(x, row),
                        ctypes.byref(written),
                    )

    ConsoleGridRenderer = WindowsConsoleRenderer
else:
    ConsoleGridRenderer = NullConsoleRenderer
