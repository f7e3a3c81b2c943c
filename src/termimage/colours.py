from collections.abc import Sequence

import numpy as np
from PIL import Image

Colour = Sequence[int]
ColourTable = list[list[tuple[int, int]]]

INTEGER_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


def to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit integer and float images down to 8-bit greyscale instead of letting convert() clip them.

    Integer samples keep their high byte, float samples are taken as 0.0-1.0.
    """
    if image.mode in INTEGER_MODES:
        arr = np.asarray(image).astype(np.int64) >> 8
    elif image.mode == "F":
        arr = np.asarray(image, dtype=np.float64) * 255.0
    else:
        return image
    return Image.fromarray(np.clip(arr, 0, 255).astype(np.uint8))


def closest_colour(pixel: Colour, palette: Sequence[Colour]) -> int:
    """Index of the palette colour closest to `pixel`, ties going to the lowest index."""
    return int(closest_colour_grid(np.asarray([[pixel[:3]]]), palette)[0, 0])


def closest_colour_grid(pixels: np.ndarray, palette: Sequence[Colour]) -> np.ndarray:
    """Closest palette index for every pixel of an (h, w, channels) array. Returns (h, w) indices.

    Uses the "redmean" weighted Euclidean distance from
    https://en.wikipedia.org/wiki/Color_difference#Euclidean
    """
    target = np.asarray(pixels, dtype=np.float64)[..., None, :3]  # (h, w, 1, 3)
    colours = np.asarray(palette, dtype=np.float64)[:, :3]  # (n, 3)
    r = (colours[:, 0] + target[..., 0]) / 2.0  # (h, w, n)
    diff = colours - target  # (h, w, n, 3)
    dist = (
        (2.0 + r / 256.0) * diff[..., 0] ** 2
        + 4.0 * diff[..., 1] ** 2
        + (2.0 + (255.0 - r) / 256.0) * diff[..., 2] ** 2
    )
    # argmin returns the first minimum, so ties go to the lowest index
    return dist.argmin(axis=-1)


def bg_colours_for(foreground_colours: Sequence[Colour]) -> Sequence[Colour]:
    """Background escapes only cover the first 8 colours."""
    return foreground_colours[:8]


def create_colourtable(
    image: Image.Image, upper_colours: Sequence[Colour], lower_colours: Sequence[Colour]
) -> ColourTable:
    """Line-major table of (upper, lower) palette indices, one pair per terminal cell.

    Row y of the table pairs pixel row 2y (matched against `upper_colours`)
    with pixel row 2y + 1 (matched against `lower_colours`).
    """
    if image.height % 2:
        raise ValueError(f"Image height must be even to pair rows into cells, got {image.height}")

    arr = np.asarray(to_8bit(image).convert("RGB"))
    upper = closest_colour_grid(arr[0::2], upper_colours)
    lower = closest_colour_grid(arr[1::2], lower_colours)
    return [
        [(int(u), int(l)) for u, l in zip(upper_row, lower_row)] for upper_row, lower_row in zip(upper, lower)
    ]
