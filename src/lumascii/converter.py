import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import numpy as np
from PIL import Image

from lumascii.charsets import DEFAULT_CHARSET
from lumascii.dimensions import resolve_dimensions
from lumascii.errors import (
    DecodeError,
    InvalidDimensionSpecError,
    MissingInputError,
    OutputWriteError,
    UnsupportedFormatError,
)
from lumascii.glyphs import glyph_indices, luminance_grid
from lumascii.grid import PixelGrid
from lumascii.sampling import resize_nearest

logger = logging.getLogger(__name__)

# File suffix -> Pillow format name
FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
}


@dataclass
class RenderOptions:
    resize: str | None = None
    scale: float | None = None
    charset: str = DEFAULT_CHARSET


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode a PNG or JPEG file, picking the decoder by suffix."""
    path = Path(path)
    fmt = FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise UnsupportedFormatError(f"unknown image format: {path}")
    if not path.exists():
        raise MissingInputError(f"input image not found: {path}")

    try:
        with Image.open(path, formats=[fmt]) as image:
            image.load()
    except (OSError, Image.DecompressionBombError) as e:
        # UnidentifiedImageError is an OSError too
        raise DecodeError(f"could not decode {path} as {fmt}: {e}") from e
    logger.debug("Opened input image '%s' (%s, %dx%d)", path, fmt, image.width, image.height)
    return image


def assemble_text(grid: PixelGrid, ramp: str) -> str:
    """Map every pixel to a glyph, row-major, with newlines between rows only."""
    indices = glyph_indices(luminance_grid(grid), len(ramp))
    glyphs = np.array(list(ramp))
    return "\n".join("".join(row) for row in glyphs[indices])


def image_to_ascii(
    image: Image.Image | str | Path,
    ramp: str,
    resize: str | None = None,
    scale: float | None = None,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)

    grid = PixelGrid.from_image(image)
    size = resolve_dimensions(grid.size, resize=resize, scale=scale)
    try:
        resized = resize_nearest(grid, size)
        logger.debug("Resized image from %dx%d to %dx%d", grid.width, grid.height, resized.width, resized.height)
        return assemble_text(resized, ramp)
    except MemoryError as e:
        raise InvalidDimensionSpecError(f"output size {size[0]}x{size[1]} is too large to render") from e


def write_output(text: str, path: str | Path | None = None, stream: TextIO | None = None) -> None:
    """Write text verbatim to a file, or print it to a stream (stdout by default)."""
    if path is None:
        try:
            print(text, file=stream if stream is not None else sys.stdout)
        except OSError as e:
            raise OutputWriteError(f"could not write output: {e}") from e
        return

    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise OutputWriteError(f"could not write output to {path}: {e}") from e
    logger.debug("Successfully wrote output to '%s'", path)
