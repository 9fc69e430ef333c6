from __future__ import annotations

import pygame

from colorcycle.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    """Drain the pygame queue, tracking window close and held keys."""

    def __init__(self) -> None:
        self.quit_requested = False
        self._keys_down: set[int] = set()

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window close requested")
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                self._keys_down.add(event.key)
            elif event.type == pygame.KEYUP:
                self._keys_down.discard(event.key)
        return not self.quit_requested

    def is_key_down(self, key: int) -> bool:
        return key in self._keys_down
