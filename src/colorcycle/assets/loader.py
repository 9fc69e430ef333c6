from os import PathLike
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from colorcycle.assets.image import BaseImage
from colorcycle.errors import ImageLoadError
from colorcycle.utilities.logging import get_logger

logger = get_logger(__name__)

RGBA_IMAGE_FORMAT = "RGBA"


class Loader:
    @classmethod
    def resolve_path(cls, path: str | PathLike[str]) -> Path:
        return Path(path).expanduser()

    @classmethod
    def load(cls, path: str | PathLike[str]) -> BaseImage:
        """Decode ``path`` into an RGBA :class:`BaseImage`."""

        resolved_path = cls.resolve_path(path)
        try:
            with Image.open(resolved_path) as image:
                rgba = image.convert(RGBA_IMAGE_FORMAT)
        except FileNotFoundError as exc:
            raise ImageLoadError(f"Image not found: {resolved_path}") from exc
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
        ) as exc:
            raise ImageLoadError(
                f"Failed to decode image {resolved_path}: {exc}"
            ) from exc

        base_image = BaseImage.from_array(np.asarray(rgba))
        logger.info(
            "Loaded %s (%dx%d)", resolved_path, base_image.width, base_image.height
        )
        return base_image
