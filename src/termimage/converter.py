import logging
from pathlib import Path
from typing import TextIO

from termimage.formats import guess_format, load_image
from termimage.options import AnsiOutputFormat
from termimage.renderers import renderer_for
from termimage.sizing import image_resized_size, resize_image

logger = logging.getLogger(__name__)


def display_image(
    out: TextIO,
    image: tuple[str, Path],
    size: tuple[int, int],
    preserve_aspect: bool = True,
    ansi_out: AnsiOutputFormat | None = AnsiOutputFormat.TRUECOLOR,
) -> None:
    """Load, resize and render the image file to `out`.

    Everything that can fail (guessing the format, decoding) happens before anything is written.
    """
    image_format = guess_format(image)
    img = load_image(image, image_format)

    new_size = image_resized_size(img.size, size, preserve_aspect)
    logger.debug("Resizing %s from %dx%d to %dx%d", image[0], *img.size, *new_size)
    resized = resize_image(img, new_size)

    renderer_for(ansi_out).write(out, resized)
