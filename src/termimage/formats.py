import enum
import logging
from pathlib import Path

from PIL import Image

from termimage.errors import FormatGuessFailed, OpenFailed
from termimage.escapes import BMP_MAGIC, GIF_MAGIC, ICO_MAGIC, JPEG_MAGIC, PNG_MAGIC

logger = logging.getLogger(__name__)

SNIFF_LENGTH = 32


class ImageFormat(enum.Enum):
    """Supported codecs, each with the Pillow plugins allowed to decode it."""

    PNG = ("PNG",)
    JPEG = ("JPEG",)
    GIF = ("GIF",)
    WEBP = ("WEBP",)
    PNM = ("PPM",)
    TIFF = ("TIFF",)
    TGA = ("TGA",)
    BMP = ("BMP", "DIB")
    ICO = ("ICO",)
    # Pillow ships no Radiance decoder, so these always fail to load
    HDR = ()

    @property
    def pillow_formats(self) -> tuple[str, ...]:
        return self.value


EXTENSIONS = {
    "png": ImageFormat.PNG,
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "jpe": ImageFormat.JPEG,
    "jif": ImageFormat.JPEG,
    "jfif": ImageFormat.JPEG,
    "jfi": ImageFormat.JPEG,
    "gif": ImageFormat.GIF,
    "webp": ImageFormat.WEBP,
    "ppm": ImageFormat.PNM,
    "tiff": ImageFormat.TIFF,
    "tif": ImageFormat.TIFF,
    "tga": ImageFormat.TGA,
    "bmp": ImageFormat.BMP,
    "dib": ImageFormat.BMP,
    "ico": ImageFormat.ICO,
    "hdr": ImageFormat.HDR,
}

# Checked in order, first match wins
MAGIC_NUMBERS = [
    (PNG_MAGIC, ImageFormat.PNG),
    (JPEG_MAGIC, ImageFormat.JPEG),
    (GIF_MAGIC, ImageFormat.GIF),
    (BMP_MAGIC, ImageFormat.BMP),
    (ICO_MAGIC, ImageFormat.ICO),
]


def guess_format(file: tuple[str, Path]) -> ImageFormat:
    """Guess the image format of (display name, path) from its extension, falling back to its magic bytes.

    A known extension wins outright and the file is never read in that case.
    """
    name, path = file
    extension = Path(path).suffix[1:].lower()
    if extension in EXTENSIONS:
        logger.debug("%s: format %s from extension", name, EXTENSIONS[extension].name)
        return EXTENSIONS[extension]

    try:
        with open(path, "rb") as f:
            head = f.read(SNIFF_LENGTH)
    except OSError as e:
        raise OpenFailed(name) from e

    for magic, image_format in MAGIC_NUMBERS:
        if head.startswith(magic):
            logger.debug("%s: format %s from magic bytes", name, image_format.name)
            return image_format
    raise FormatGuessFailed(name)


def load_image(file: tuple[str, Path], image_format: ImageFormat) -> Image.Image:
    """Decode the file as the given format. Decode errors are reported as OpenFailed too."""
    name, path = file
    try:
        with Image.open(path, formats=image_format.pillow_formats) as image:
            image.load()
            return image.copy()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise OpenFailed(name) from e
