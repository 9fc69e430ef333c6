from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pygame

from colorcycle.errors import FrameUpdateError, WindowCreationError
from colorcycle.runtime.frame_pacer import FramePacer
from colorcycle.runtime.pygame_event_handler import PygameEventHandler
from colorcycle.utilities.logging import get_logger

logger = get_logger(__name__)

# Little-endian 0xAARRGGBB words are laid out in memory as B, G, R, A.
PACKED_BUFFER_FORMAT = "BGRA"


def surface_from_buffer(
    buffer: np.ndarray, width: int, height: int
) -> pygame.Surface:
    """Wrap a packed 0xAARRGGBB buffer in a pygame surface."""

    if len(buffer) != width * height:
        raise FrameUpdateError(
            f"Buffer holds {len(buffer)} pixels, expected {width}x{height}"
        )
    raw = np.ascontiguousarray(buffer, dtype="<u4").tobytes()
    return pygame.image.frombuffer(raw, (width, height), PACKED_BUFFER_FORMAT)


@dataclass
class WindowSurface:
    """A fixed-size pygame window that presents packed pixel buffers."""

    pacer: FramePacer
    event_handler: PygameEventHandler = field(default_factory=PygameEventHandler)
    screen: pygame.Surface | None = None

    def open(self, title: str, width: int, height: int) -> None:
        logger.info("Opening %dx%d window", width, height)
        try:
            pygame.display.init()
            pygame.display.set_caption(title)
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise WindowCreationError(f"Unable to create window: {exc}") from exc

    def close(self) -> None:
        self.screen = None
        pygame.quit()

    def is_open(self) -> bool:
        if self.screen is None:
            return False
        return self.event_handler.handle_events()

    def is_key_down(self, key: int) -> bool:
        return self.event_handler.is_key_down(key)

    def get_size(self) -> tuple[int, int]:
        if self.screen is None:
            raise FrameUpdateError("Window is not open")
        return self.screen.get_size()

    def update_with_buffer(self, buffer: np.ndarray, width: int, height: int) -> None:
        if self.get_size() != (width, height):
            raise FrameUpdateError(
                f"Window is {self.get_size()}, buffer targets {(width, height)}"
            )
        frame = surface_from_buffer(buffer, width, height)
        try:
            self.screen.blit(frame, (0, 0))
            pygame.display.flip()
        except pygame.error as exc:
            raise FrameUpdateError(f"Unable to present frame: {exc}") from exc
        self.pacer.wait()
