import logging

from PIL import Image

from termimage.colours import to_8bit

logger = logging.getLogger(__name__)


def image_resized_size(
    size: tuple[int, int], term_size: tuple[int, int], preserve_aspect: bool
) -> tuple[int, int]:
    """Pixel size to downscale an image of `size` to, for a terminal of `term_size` (columns, rows).

    The result is twice as tall as the terminal since each cell shows two pixels, one above the other.
    """
    width, height = size
    columns, rows = term_size
    if not (width and height and columns and rows):
        raise ValueError(f"Can't resize image of size {size} to terminal of size {term_size}")

    new_width = columns
    new_height = rows * 2
    if not preserve_aspect:
        return (new_width, new_height)

    ratio = width / height
    new_ratio = new_width / new_height
    # Scale by whichever side binds, so the image fits inside the box both ways
    if new_ratio > ratio:
        scale = new_height / height
    else:
        scale = new_width / width

    planned_width = max(1, int(width * scale))
    planned_height = max(2, int(height * scale) // 2 * 2)
    logger.debug(
        "Planned %dx%d for source %dx%d in %dx%d cells", planned_width, planned_height, width, height, columns, rows
    )
    return (planned_width, planned_height)


def resize_image(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    return to_8bit(image).convert("RGBA").resize(size, Image.Resampling.NEAREST)
