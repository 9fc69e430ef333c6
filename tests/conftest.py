import numpy as np
import pygame
import pytest

from colorcycle.assets.image import BaseImage


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def no_frame_pacing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable the frame interval so loop tests do not sleep."""

    monkeypatch.setenv("COLORCYCLE_FRAME_INTERVAL_MS", "0")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture()
def red_image() -> BaseImage:
    """A 2x2 opaque red raster."""

    pixels = np.zeros((2, 2, 4), dtype=np.uint8)
    pixels[...] = (255, 0, 0, 255)
    return BaseImage.from_array(pixels)


@pytest.fixture()
def gradient_image() -> BaseImage:
    """A 3x2 raster with distinct, partly translucent pixels."""

    pixels = np.array(
        [
            [(0, 0, 0, 255), (10, 20, 30, 255), (200, 100, 50, 128)],
            [(255, 255, 255, 255), (1, 2, 3, 0), (90, 180, 45, 64)],
        ],
        dtype=np.uint8,
    )
    return BaseImage.from_array(pixels)
