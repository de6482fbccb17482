from __future__ import annotations

from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from ..config import Limits
from ..errors import InputFormatError
from ..grid import PixelGrid, check_dimensions
from ..render import image_to_bw_pixels
from .base import GridSource


class ImageLoader(GridSource):
    def __init__(self, dither: bool = True) -> None:
        self.dither = dither

    def load(self, path: str, limits: Optional[Limits] = None) -> PixelGrid:
        limits = limits or Limits()
        img = self._load_image(path)
        check_dimensions(img.width, img.height, limits)
        pixels = image_to_bw_pixels(self._normalize_image(img), dither=self.dither)
        return PixelGrid.build(img.width, img.height, pixels, limits)

    @staticmethod
    def _load_image(path: str) -> Image.Image:
        try:
            with Image.open(path) as img:
                img = ImageOps.exif_transpose(img)
                return img.copy()
        except (OSError, UnidentifiedImageError) as exc:
            raise InputFormatError(f"Cannot read image '{path}': {exc}") from exc

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode not in ("RGB", "L", "1"):
            return img.convert("RGB")
        return img
