from __future__ import annotations

import numpy as np

ALPHA_SHIFT = np.uint32(24)
RED_SHIFT = np.uint32(16)
GREEN_SHIFT = np.uint32(8)


def pack_argb(raster: np.ndarray) -> np.ndarray:
    """Pack an ``(height, width, 4)`` RGBA raster into 0xAARRGGBB words.

    The result is flat and row-major from the top-left pixel, which is the
    layout :class:`colorcycle.runtime.window.WindowSurface` consumes.
    """

    if raster.ndim != 3 or raster.shape[2] != 4:
        raise ValueError(
            f"Expected an (height, width, 4) raster, got shape {raster.shape}"
        )

    channels = raster.astype(np.uint32)
    red = channels[..., 0]
    green = channels[..., 1]
    blue = channels[..., 2]
    alpha = channels[..., 3]

    packed = (
        (alpha << ALPHA_SHIFT)
        | (red << RED_SHIFT)
        | (green << GREEN_SHIFT)
        | blue
    )
    return packed.reshape(-1)
