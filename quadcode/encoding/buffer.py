from __future__ import annotations

from ..errors import ResourceError

_EXTRA_SYMBOLS = 16


def code_capacity(width: int, height: int) -> int:
    """Worst-case code length for a width x height grid."""
    return width * height * 3 + _EXTRA_SYMBOLS


class CodeBuffer:
    """Pre-sized symbol buffer with an explicit write cursor."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Capacity must not be negative")
        try:
            self._data = bytearray(capacity)
        except MemoryError as exc:
            raise ResourceError(f"Cannot allocate a code buffer of {capacity} symbols") from exc
        self._pos = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        return self._pos

    def append(self, symbol: str) -> None:
        if self._pos >= len(self._data):
            raise ResourceError(f"Code buffer full ({len(self._data)} symbols)")
        self._data[self._pos] = ord(symbol)
        self._pos += 1

    def getvalue(self) -> str:
        return self._data[: self._pos].decode("ascii")
