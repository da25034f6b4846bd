import numpy as np
import pytest
from PIL import Image

from lumascii.grid import PixelGrid


def make_grid(width, height):
    """Grid whose red channel encodes x and green channel encodes y."""
    pixels = np.zeros((height, width, 3))
    pixels[:, :, 0] = np.arange(width)[None, :] / 255.0
    pixels[:, :, 1] = np.arange(height)[:, None] / 255.0
    return PixelGrid(pixels)


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "input.png"
    Image.new("RGB", (4, 2), (255, 255, 255)).save(path)
    return path
