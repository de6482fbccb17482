from .buffer import CodeBuffer, code_capacity
from .quadtree import (
    ALPHABET,
    QuadtreeStats,
    count_symbols,
    encode_grid,
    encode_region,
    max_depth,
    region_value,
    split_sizes,
)

__all__ = [
    "ALPHABET",
    "CodeBuffer",
    "QuadtreeStats",
    "code_capacity",
    "count_symbols",
    "encode_grid",
    "encode_region",
    "max_depth",
    "region_value",
    "split_sizes",
]
