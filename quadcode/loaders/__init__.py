from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ..config import Limits
from ..errors import InputFormatError
from ..grid import PixelGrid
from .base import GridSource
from .image import ImageLoader
from .manual import ManualLoader
from .pbm import PbmLoader

IMAGE_EXTENSIONS = (".png", ".bmp", ".gif", ".jpg", ".jpeg")


class GridLoader:
    def __init__(
        self,
        sources: Optional[Dict[str, GridSource]] = None,
        dither: bool = True,
        fallback: Optional[GridSource] = None,
    ) -> None:
        if sources is None:
            sources = {}
            pbm_loader = PbmLoader()
            sources[""] = pbm_loader
            sources[".pbm"] = pbm_loader
            if fallback is None:
                # plain PBM is recognized by its P1 marker, not its name
                fallback = pbm_loader
            image_loader = ImageLoader(dither=dither)
            for ext in IMAGE_EXTENSIONS:
                sources[ext] = image_loader
        self._sources = sources
        self._fallback = fallback

    @property
    def supported_extensions(self) -> Set[str]:
        return {ext for ext in self._sources if ext}

    def load(self, path: str, limits: Optional[Limits] = None) -> PixelGrid:
        ext = os.path.splitext(path)[1].lower()
        source = self._sources.get(ext, self._fallback)
        if not source:
            supported = ", ".join(sorted(self.supported_extensions))
            raise InputFormatError(f"Unsupported file extension: {ext} (supported: {supported})")
        return source.load(path, limits)


def load_grid(path: str, limits: Optional[Limits] = None, dither: bool = True) -> PixelGrid:
    return GridLoader(dither=dither).load(path, limits)


__all__ = ["GridLoader", "GridSource", "ImageLoader", "ManualLoader", "PbmLoader", "load_grid"]
