import numpy as np

from lumascii.grid import PixelGrid


def _nearest_indices(source: int, target: int) -> np.ndarray:
    """Source index for each of `target` output positions along one axis."""
    if target == 0:
        return np.empty(0, dtype=np.intp)
    # floor(i * source / target) in integer arithmetic
    return np.arange(target, dtype=np.intp) * source // target


def resize_nearest(grid: PixelGrid, size: tuple[int, int]) -> PixelGrid:
    """Resize with nearest-neighbour point sampling. No blending of any kind."""
    width, height = size
    if width < 0 or height < 0:
        raise ValueError(f"Target size must not be negative: {width}x{height}")

    xs = _nearest_indices(grid.width, width)
    ys = _nearest_indices(grid.height, height)

    # Fancy indexing copies, so the source grid is left alone
    pixels = grid.pixels[ys[:, None], xs[None, :]]
    return PixelGrid(pixels)
