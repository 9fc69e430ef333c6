from __future__ import annotations

import time
from typing import Protocol

import numpy as np
import pygame

from colorcycle.assets.image import BaseImage
from colorcycle.overlay import OverlayState, advance, blend, color_at, pack_argb
from colorcycle.utilities.env import ChannelPolicy, Configuration
from colorcycle.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "Color Cycle"
EXIT_KEY = pygame.K_ESCAPE


class DisplaySurface(Protocol):
    def open(self, title: str, width: int, height: int) -> None: ...

    def close(self) -> None: ...

    def is_open(self) -> bool: ...

    def is_key_down(self, key: int) -> bool: ...

    def update_with_buffer(
        self, buffer: np.ndarray, width: int, height: int
    ) -> None: ...


def render_frame(
    image: BaseImage, state: OverlayState, policy: ChannelPolicy
) -> np.ndarray:
    """Tint ``image`` with the color for ``state`` and pack it for display."""

    color = color_at(state.phase, policy)
    return pack_argb(blend(image, color, state.alpha))


class ColorCycleLoop:
    def __init__(
        self,
        image: BaseImage,
        surface: DisplaySurface,
        state: OverlayState,
        policy: ChannelPolicy | None = None,
    ) -> None:
        self.image = image
        self.surface = surface
        self.state = state
        self.policy = policy if policy is not None else Configuration.channel_policy()
        self.frames = 0
        self._stats_interval = Configuration.stats_interval_frames()
        self._stats_started: float | None = None

    def start(self, max_frames: int | None = None) -> int:
        logger.info("Starting ColorCycleLoop (%s channels)", self.policy)
        try:
            self.surface.open(WINDOW_TITLE, self.image.width, self.image.height)
            return self.run(max_frames=max_frames)
        finally:
            self.surface.close()

    def run(self, max_frames: int | None = None) -> int:
        """Present frames until the window closes, Escape is held, or ``max_frames``."""

        self._stats_started = time.monotonic()
        while self.surface.is_open() and not self.surface.is_key_down(EXIT_KEY):
            if max_frames is not None and self.frames >= max_frames:
                break
            self.step()
        logger.info("Leaving main loop after %d frames", self.frames)
        return self.frames

    def step(self) -> None:
        self.state = advance(self.state)
        buffer = render_frame(self.image, self.state, self.policy)
        self.surface.update_with_buffer(buffer, self.image.width, self.image.height)
        self.frames += 1
        if self.frames % self._stats_interval == 0:
            self._log_stats()

    def _log_stats(self) -> None:
        if self._stats_started is None:
            return
        elapsed = time.monotonic() - self._stats_started
        fps = self.frames / elapsed if elapsed > 0 else float("inf")
        logger.debug("Presented %d frames (%.1f fps)", self.frames, fps)
