from __future__ import annotations

import math
from dataclasses import dataclass

TAU = 2.0 * math.pi


@dataclass(slots=True, frozen=True)
class OverlayState:
    """Constant overlay opacity plus the current position in the color cycle."""

    alpha: int
    phase: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.alpha <= 255:
            raise ValueError(f"alpha must be between 0 and 255, got {self.alpha}")
        if not 0.0 <= self.phase < TAU:
            raise ValueError(f"phase must lie in [0, 2π), got {self.phase}")
