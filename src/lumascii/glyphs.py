import math

import numpy as np

from lumascii.grid import PixelGrid

# Simple luma weights. Not gamma corrected.
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luminance(r: float, g: float, b: float) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def luminance_grid(grid: PixelGrid) -> np.ndarray:
    """Luminance of every pixel, shape (height, width)."""
    return grid.pixels @ np.asarray(LUMA_WEIGHTS)


def glyph_index(lum: float, n: int) -> int:
    """Index into a ramp of length n for luminance in [0, 1].

    floor(1.0 * n) is n, so the upper end is clamped explicitly.
    """
    if n < 1:
        raise ValueError("Character ramp must not be empty")
    return min(max(math.floor(lum * n), 0), n - 1)


def glyph_for(lum: float, ramp: str) -> str:
    return ramp[glyph_index(lum, len(ramp))]


def glyph_indices(lums: np.ndarray, n: int) -> np.ndarray:
    """Vectorised glyph_index."""
    if n < 1:
        raise ValueError("Character ramp must not be empty")
    return np.clip(np.floor(lums * n), 0, n - 1).astype(np.intp)
