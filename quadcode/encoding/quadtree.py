from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid import PixelGrid
from .buffer import CodeBuffer, code_capacity

SYMBOL_BLACK = "P"
SYMBOL_WHITE = "B"
SYMBOL_SPLIT = "X"
ALPHABET = frozenset(SYMBOL_BLACK + SYMBOL_WHITE + SYMBOL_SPLIT)


def max_depth(width: int, height: int) -> int:
    """Deepest recursion level reached when encoding a width x height grid."""
    return (max(width, height, 1) - 1).bit_length() + 1


def split_sizes(size: int) -> Tuple[int, int]:
    """Split a dimension so the first (top/left) part gets the extra pixel."""
    first = (size + 1) // 2
    return first, size - first


def region_value(grid: PixelGrid, row_offset: int, col_offset: int, w: int, h: int) -> Optional[int]:
    """Return the shared pixel value of a region, or None if it is mixed."""
    first = grid.pixel_at(row_offset, col_offset)
    pixels = grid.pixels
    for row in range(row_offset, row_offset + h):
        start = row * grid.width + col_offset
        if pixels[start : start + w].count(first) != w:
            return None
    return first


def encode_region(
    grid: PixelGrid,
    row_offset: int,
    col_offset: int,
    w: int,
    h: int,
    buffer: CodeBuffer,
    depth: int = 1,
) -> None:
    """Append the quadtree code of one rectangular region to the buffer."""
    if w <= 0 or h <= 0:
        return
    assert depth <= max_depth(grid.width, grid.height), "quadtree recursion too deep"

    value = region_value(grid, row_offset, col_offset, w, h)
    if value is not None:
        buffer.append(SYMBOL_BLACK if value == 1 else SYMBOL_WHITE)
        return

    buffer.append(SYMBOL_SPLIT)
    mid_w, rest_w = split_sizes(w)
    mid_h, rest_h = split_sizes(h)
    # top-left, top-right, bottom-left, bottom-right
    encode_region(grid, row_offset, col_offset, mid_w, mid_h, buffer, depth + 1)
    encode_region(grid, row_offset, col_offset + mid_w, rest_w, mid_h, buffer, depth + 1)
    encode_region(grid, row_offset + mid_h, col_offset, mid_w, rest_h, buffer, depth + 1)
    encode_region(grid, row_offset + mid_h, col_offset + mid_w, rest_w, rest_h, buffer, depth + 1)


def encode_grid(grid: PixelGrid) -> str:
    """Encode a whole grid and return the finished P/B/X code."""
    buffer = CodeBuffer(code_capacity(grid.width, grid.height))
    encode_region(grid, 0, 0, grid.width, grid.height, buffer)
    return buffer.getvalue()


@dataclass(frozen=True)
class QuadtreeStats:
    internal: int
    black_leaves: int
    white_leaves: int

    @property
    def leaves(self) -> int:
        return self.black_leaves + self.white_leaves

    @property
    def total(self) -> int:
        return self.internal + self.leaves


def count_symbols(code: str) -> QuadtreeStats:
    unknown = set(code) - ALPHABET
    if unknown:
        raise ValueError(f"Unexpected symbols in code: {''.join(sorted(unknown))}")
    return QuadtreeStats(
        internal=code.count(SYMBOL_SPLIT),
        black_leaves=code.count(SYMBOL_BLACK),
        white_leaves=code.count(SYMBOL_WHITE),
    )
