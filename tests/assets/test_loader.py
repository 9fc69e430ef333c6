from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from colorcycle.assets.image import BaseImage
from colorcycle.assets.loader import Loader
from colorcycle.errors import ColorCycleError, ImageLoadError


def test_load_decodes_rgba(tmp_path: Path) -> None:
    path = tmp_path / "tile.png"
    image = Image.new("RGBA", (3, 2), (10, 20, 30, 40))
    image.putpixel((2, 1), (200, 100, 50, 255))
    image.save(path)

    base = Loader.load(path)

    assert (base.width, base.height) == (3, 2)
    assert base.pixels.shape == (2, 3, 4)
    assert tuple(base.pixels[0, 0]) == (10, 20, 30, 40)
    assert tuple(base.pixels[1, 2]) == (200, 100, 50, 255)


def test_load_promotes_rgb_to_opaque(tmp_path: Path) -> None:
    path = tmp_path / "tile.png"
    Image.new("RGB", (2, 2), (1, 2, 3)).save(path)

    base = Loader.load(str(path))

    assert (base.pixels == (1, 2, 3, 255)).all()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ImageLoadError, match="not found"):
        Loader.load(tmp_path / "missing.jpg")


def test_undecodable_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"definitely not a jpeg")

    with pytest.raises(ColorCycleError, match="Failed to decode"):
        Loader.load(path)


def test_decompression_bomb_raises_load_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "huge.png"
    Image.new("RGB", (1, 1)).save(path)

    def refuse(*_args, **_kwargs):
        raise Image.DecompressionBombError("too many pixels")

    monkeypatch.setattr(Image, "open", refuse)

    with pytest.raises(ImageLoadError, match="too many pixels"):
        Loader.load(path)


def test_loaded_pixels_are_read_only(tmp_path: Path) -> None:
    path = tmp_path / "tile.png"
    Image.new("RGB", (1, 1)).save(path)

    base = Loader.load(path)

    with pytest.raises(ValueError):
        base.pixels[0, 0, 0] = 1


class TestBaseImage:
    def test_copies_source_array(self) -> None:
        source = np.zeros((1, 2, 4), dtype=np.uint8)

        base = BaseImage.from_array(source)
        source[0, 0] = (9, 9, 9, 9)

        assert tuple(base.pixels[0, 0]) == (0, 0, 0, 0)
        assert base.size == (2, 1)

    def test_rejects_mismatched_dimensions(self) -> None:
        with pytest.raises(ValueError, match="shape"):
            BaseImage(width=3, height=1, pixels=np.zeros((1, 2, 4), dtype=np.uint8))
