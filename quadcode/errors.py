from __future__ import annotations


class GridError(ValueError):
    """Base class for every failure that prevents a grid from being encoded."""


class InputFormatError(GridError):
    pass


class BoundsError(GridError):
    pass


class PixelValueError(GridError):
    pass


class TruncationError(GridError):
    def __init__(self, read: int, expected: int) -> None:
        super().__init__(f"Incomplete image ({read}/{expected} pixels read)")
        self.read = read
        self.expected = expected


class ResourceError(GridError):
    pass
