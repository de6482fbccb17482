from __future__ import annotations

from typing import Optional

from ..config import Limits
from ..errors import InputFormatError
from ..grid import PixelGrid


class GridSource:
    def load(self, path: str, limits: Optional[Limits] = None) -> PixelGrid:
        raise NotImplementedError


def read_text_file(path: str) -> str:
    try:
        with open(path, "r", encoding="latin-1") as handle:
            return handle.read()
    except OSError as exc:
        raise InputFormatError(f"Cannot open file '{path}': {exc.strerror or exc}") from exc
