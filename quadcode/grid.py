from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .config import Limits
from .errors import BoundsError, PixelValueError, ResourceError, TruncationError


@dataclass(frozen=True)
class PixelGrid:
    """Row-major 0/1 pixel grid consumed by the quadrant encoder."""

    width: int
    height: int
    pixels: Tuple[int, ...]

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        pixels: Iterable[int],
        limits: Optional[Limits] = None,
    ) -> "PixelGrid":
        """Validate everything up front and return a read-only grid."""
        limits = limits or Limits()
        check_dimensions(width, height, limits)
        try:
            data = tuple(pixels)
        except MemoryError as exc:
            raise ResourceError(f"Not enough memory for a {width}x{height} image") from exc
        grid = cls(width, height, data)
        grid.validate(limits)
        return grid

    def validate(self, limits: Optional[Limits] = None) -> None:
        """Check dimensions, pixel count and pixel values."""
        check_dimensions(self.width, self.height, limits or Limits())
        expected = self.width * self.height
        if len(self.pixels) < expected:
            raise TruncationError(len(self.pixels), expected)
        if len(self.pixels) > expected:
            raise PixelValueError(f"Too many pixels ({len(self.pixels)}, expected {expected})")
        for index, value in enumerate(self.pixels):
            if value != 0 and value != 1:
                raise PixelValueError(f"Invalid pixel at index {index}: {value}")

    def pixel_at(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Pixel ({row}, {col}) outside {self.width}x{self.height} grid")
        return self.pixels[row * self.width + col]

    def row(self, index: int) -> Tuple[int, ...]:
        if not 0 <= index < self.height:
            raise IndexError(f"Row {index} outside grid of height {self.height}")
        start = index * self.width
        return self.pixels[start : start + self.width]


def check_dimensions(width: int, height: int, limits: Limits) -> None:
    if not limits.accepts(width, height):
        raise BoundsError(
            f"Image dimensions {width}x{height} outside the allowed range 1x1 to {limits.describe()}"
        )
