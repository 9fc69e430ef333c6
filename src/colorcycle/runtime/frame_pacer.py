from __future__ import annotations

import time
from typing import Callable

from colorcycle.utilities.env import Configuration


class FramePacer:
    """Hold back each frame until a minimum interval has passed."""

    def __init__(
        self,
        min_interval_s: float,
        *,
        monotonic: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval_s < 0.0:
            raise ValueError("min_interval_s must not be negative")
        self._min_interval_s = min_interval_s
        self._monotonic = monotonic
        self._sleep = sleep
        self._last_frame_time: float | None = None

    @classmethod
    def from_configuration(cls) -> FramePacer:
        return cls(Configuration.frame_interval_ms() / 1000.0)

    @property
    def min_interval_s(self) -> float:
        return self._min_interval_s

    def wait(self) -> float:
        """Block until the interval has elapsed; return the time slept."""

        now = self._monotonic()
        slept = 0.0
        if self._last_frame_time is not None and self._min_interval_s > 0.0:
            remaining = self._min_interval_s - (now - self._last_frame_time)
            if remaining > 0.0:
                self._sleep(remaining)
                slept = remaining
                now = self._monotonic()
        self._last_frame_time = now
        return slept
