from __future__ import annotations

import numpy as np

from colorcycle.assets.image import BaseImage
from colorcycle.display.color import Color

MAX_CHANNEL = 255.0


def _to_bytes(values: np.ndarray) -> np.ndarray:
    # Truncate toward zero, as a float-to-byte cast does.
    return np.floor(values).clip(0, 255).astype(np.uint8)


def blend(base: BaseImage, color: Color, alpha: int) -> np.ndarray:
    """Composite a uniform ``color`` at ``alpha`` over every pixel of ``base``.

    Uses the Porter-Duff "over" operator on straight (non-premultiplied)
    RGBA. The returned raster is a new ``(height, width, 4)`` uint8 array;
    ``base`` is never written to.
    """

    if not 0 <= alpha <= 255:
        raise ValueError(f"alpha must be between 0 and 255, got {alpha}")

    if alpha == 0:
        return base.copy_pixels()
    if alpha == 255:
        return np.full_like(base.pixels, color.with_alpha(alpha))

    # Work in byte units so an opaque base divides exactly by 255.
    destination = base.pixels.astype(np.float64)
    destination_rgb = destination[..., :3]
    destination_alpha = destination[..., 3:]

    source_rgb = np.asarray(color.tuple(), dtype=np.float64)
    remaining = MAX_CHANNEL - alpha

    out_alpha = alpha + destination_alpha * remaining / MAX_CHANNEL
    premultiplied = (
        source_rgb * alpha
        + destination_rgb * destination_alpha * remaining / MAX_CHANNEL
    )
    out_rgb = np.divide(
        premultiplied,
        out_alpha,
        out=np.zeros_like(premultiplied),
        where=out_alpha > 0.0,
    )

    return _to_bytes(np.concatenate((out_rgb, out_alpha), axis=-1))
