from __future__ import annotations

import re
from typing import List, Optional

from ..config import Limits
from ..errors import InputFormatError, PixelValueError, TruncationError
from ..grid import PixelGrid, check_dimensions
from .base import GridSource, read_text_file

PBM_MAGIC = "P1"

_INT_RE = re.compile(r"[+-]?\d+")


class PbmScanner:
    """Cursor over the text of a plain PBM file."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def skip_comments(self) -> None:
        """Skip whitespace and '#' comments up to the next useful character."""
        while self._pos < len(self._text):
            ch = self._text[self._pos]
            if ch == "#":
                end = self._text.find("\n", self._pos)
                self._pos = len(self._text) if end < 0 else end + 1
            elif ch.isspace():
                self._pos += 1
            else:
                break

    def read_word(self, max_len: int) -> str:
        self.skip_whitespace()
        start = self._pos
        while (
            self._pos < len(self._text)
            and self._pos - start < max_len
            and not self._text[self._pos].isspace()
        ):
            self._pos += 1
        return self._text[start : self._pos]

    def read_int(self) -> Optional[int]:
        self.skip_whitespace()
        match = _INT_RE.match(self._text, self._pos)
        if not match:
            return None
        self._pos = match.end()
        return int(match.group())


class PbmLoader(GridSource):
    def load(self, path: str, limits: Optional[Limits] = None) -> PixelGrid:
        return self.parse(read_text_file(path), limits)

    def parse(self, text: str, limits: Optional[Limits] = None) -> PixelGrid:
        limits = limits or Limits()
        scanner = PbmScanner(text)
        magic = scanner.read_word(len(PBM_MAGIC))
        if magic != PBM_MAGIC:
            raise InputFormatError(f"Invalid PBM format (expected '{PBM_MAGIC}')")

        scanner.skip_comments()
        width = scanner.read_int()
        height = scanner.read_int() if width is not None else None
        if width is None or height is None:
            raise InputFormatError("Could not read the image dimensions")
        check_dimensions(width, height, limits)

        total = width * height
        pixels: List[int] = []
        while len(pixels) < total:
            value = scanner.read_int()
            if value is None:
                # a comment or stray token ends the pixel data early
                break
            if value != 0 and value != 1:
                raise PixelValueError(f"Invalid pixel: {value}")
            pixels.append(value)
        if len(pixels) < total:
            raise TruncationError(len(pixels), total)
        return PixelGrid.build(width, height, pixels, limits)
