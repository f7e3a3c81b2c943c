from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, TextIO

import numpy as np
from PIL import Image

from termimage.colours import Colour, bg_colours_for, create_colourtable, to_8bit
from termimage.console import ConsoleGridRenderer
from termimage.escapes import (
    ANSI_BG_COLOUR_ESCAPES,
    ANSI_COLOUR_ESCAPES,
    ANSI_COLOURS_BLACK_BG,
    ANSI_COLOURS_WHITE_BG,
    ANSI_RESET_ATTRIBUTES,
    ASCII_RAMP,
    HALF_BLOCK,
    TRUECOLOR_BG,
    TRUECOLOR_FG,
)
from termimage.options import AnsiOutputFormat

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def write(self, out: TextIO, image: Image.Image) -> None:
        """Write an already resized image to `out`."""
        ...


class AnsiRenderer:
    """Half-block cells approximated to a 16-colour palette with 3/4-bit ANSI escapes."""

    def __init__(self, foreground_colours: Sequence[Colour]):
        self.foreground_colours = foreground_colours
        self.background_colours = bg_colours_for(foreground_colours)

    def write(self, out: TextIO, image: Image.Image) -> None:
        for line in create_colourtable(image, self.foreground_colours, self.background_colours):
            parts = [
                f"{ANSI_COLOUR_ESCAPES[upper]}{ANSI_BG_COLOUR_ESCAPES[lower]}{HALF_BLOCK}" for upper, lower in line
            ]
            parts.append(ANSI_RESET_ATTRIBUTES)
            out.write("".join(parts) + "\n")


class TruecolorRenderer:
    """Half-block cells with the literal pixel colours as 24-bit escapes."""

    def write(self, out: TextIO, image: Image.Image) -> None:
        arr = np.asarray(to_8bit(image).convert("RGB"))
        for y in range(image.height // 2):
            upper_row = arr[y * 2]
            lower_row = arr[y * 2 + 1]
            parts = []
            for (ur, ug, ub), (lr, lg, lb) in zip(upper_row.tolist(), lower_row.tolist()):
                parts.append(TRUECOLOR_FG.format(ur, ug, ub) + TRUECOLOR_BG.format(lr, lg, lb) + HALF_BLOCK)
            parts.append(ANSI_RESET_ATTRIBUTES)
            out.write("".join(parts) + "\n")


def ascii_for_intensity(intensity: int) -> str:
    return ASCII_RAMP[min(intensity // 32, len(ASCII_RAMP) - 1)]


def pixel_intensity(r: int, g: int, b: int, a: int = 255) -> int:
    """Luminance in 0..255; fully transparent pixels count as black."""
    if a == 0:
        return 0
    return r // 3 + g // 3 + b // 3


class AsciiRenderer:
    """Luminance ASCII art, one glyph per pixel on every even row."""

    def write(self, out: TextIO, image: Image.Image) -> None:
        logger.debug("ASCII rendering %dx%d image", image.width, image.height)
        arr = np.asarray(to_8bit(image).convert("RGBA"))
        # Odd rows are dropped rather than merged
        for row in arr[0::2].tolist():
            out.write("".join(ascii_for_intensity(pixel_intensity(*pixel)) for pixel in row) + "\n")


def renderer_for(ansi_out: AnsiOutputFormat | None) -> Renderer:
    """Renderer for an output format; None means drawing straight into the platform console."""
    if ansi_out is None:
        renderer = ConsoleGridRenderer()
    elif ansi_out is AnsiOutputFormat.TRUECOLOR:
        renderer = TruecolorRenderer()
    elif ansi_out is AnsiOutputFormat.SIMPLE_BLACK:
        renderer = AnsiRenderer(ANSI_COLOURS_BLACK_BG)
    elif ansi_out is AnsiOutputFormat.SIMPLE_WHITE:
        renderer = AnsiRenderer(ANSI_COLOURS_WHITE_BG)
    else:
        renderer = AsciiRenderer()
    logger.debug("Using %s for output format %s", type(renderer).__name__, ansi_out)
    return renderer
