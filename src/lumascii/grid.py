from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class PixelGrid:
    """Read-only RGB samples in [0, 1], stored as a (height, width, 3) array."""

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"Expected (height, width, 3) pixels, got shape {self.pixels.shape}")
        self.pixels.flags.writeable = False

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelGrid:
        if image.mode == "I" or image.mode.startswith("I;16"):
            # 16-bit greyscale; convert("RGB") would clip it to 255
            grey = np.clip(np.asarray(image, dtype=np.float64) / 65535.0, 0.0, 1.0)
            return cls(np.repeat(grey[:, :, None], 3, axis=2))
        # convert("RGB") drops any alpha channel without compositing
        arr = np.asarray(image.convert("RGB"), dtype=np.float64) / 255.0
        return cls(arr)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def rgb(self, x: int, y: int) -> tuple[float, float, float]:
        r, g, b = self.pixels[y, x]
        return (float(r), float(g), float(b))
