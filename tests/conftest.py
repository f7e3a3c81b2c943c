import os

import pytest
from PIL import Image

needs_windows = pytest.mark.skipif(os.name != "nt", reason="Console attributes only exist on Windows")
not_windows = pytest.mark.skipif(os.name == "nt", reason="Console renderer draws on Windows")


def make_image(rows, mode="RGBA"):
    """Build an image from a list of pixel rows."""
    height = len(rows)
    width = len(rows[0])
    img = Image.new(mode, (width, height))
    img.putdata([pixel for row in rows for pixel in row])
    return img
