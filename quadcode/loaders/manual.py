from __future__ import annotations

import re
import sys
from typing import Iterator, List, Optional, TextIO

from ..config import Limits
from ..errors import InputFormatError, PixelValueError, TruncationError
from ..grid import PixelGrid, check_dimensions

_INT_RE = re.compile(r"[+-]?\d+")


def iter_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class ManualLoader:
    """Reads width, height and pixels typed by the user."""

    def __init__(self, stream: Optional[TextIO] = None, prompt: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._prompt = prompt if prompt is not None else sys.stdout

    def load(self, limits: Optional[Limits] = None) -> PixelGrid:
        limits = limits or Limits()
        tokens = iter_tokens(self._stream)

        self._say("Manual mode selected.")
        self._ask(f"Enter width (max {limits.max_width}): ")
        width = self._read_dimension(tokens, "width")
        self._ask(f"Enter height (max {limits.max_height}): ")
        height = self._read_dimension(tokens, "height")
        check_dimensions(width, height, limits)

        total = width * height
        self._say("Enter the pixels (0 = white, 1 = black), separated by spaces or newlines:")
        pixels: List[int] = []
        for token in tokens:
            if token not in ("0", "1"):
                raise PixelValueError(f"Invalid pixel value: {token}")
            pixels.append(int(token))
            if len(pixels) == total:
                break
        if len(pixels) < total:
            raise TruncationError(len(pixels), total)
        return PixelGrid.build(width, height, pixels, limits)

    @staticmethod
    def _read_dimension(tokens: Iterator[str], name: str) -> int:
        token = next(tokens, None)
        if token is None:
            raise InputFormatError(f"Missing image {name}")
        if not _INT_RE.fullmatch(token):
            raise InputFormatError(f"Could not read the image {name}: '{token}'")
        return int(token)

    def _ask(self, text: str) -> None:
        self._prompt.write(text)
        self._prompt.flush()

    def _say(self, text: str) -> None:
        print(text, file=self._prompt)
