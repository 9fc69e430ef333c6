from __future__ import annotations

from dataclasses import dataclass

import numpy as np

CHANNELS = 4


@dataclass(frozen=True)
class BaseImage:
    """Decoded RGBA raster that stays read-only for the whole run."""

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self) -> None:
        expected = (self.height, self.width, CHANNELS)
        if self.pixels.shape != expected:
            raise ValueError(
                f"Expected pixel array of shape {expected}, got {self.pixels.shape}"
            )
        pixels = np.array(self.pixels, dtype=np.uint8, copy=True)
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> BaseImage:
        height, width = pixels.shape[:2]
        return cls(width=width, height=height, pixels=pixels)

    def copy_pixels(self) -> np.ndarray:
        return self.pixels.copy()

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
