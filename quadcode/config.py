from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 768
MAX_WIDTH_ENV_VAR = "QUADCODE_MAX_WIDTH"
MAX_HEIGHT_ENV_VAR = "QUADCODE_MAX_HEIGHT"


@dataclass(frozen=True)
class Limits:
    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT

    def __post_init__(self) -> None:
        if self.max_width <= 0:
            raise ValueError(f"Maximum width must be greater than zero, got {self.max_width}")
        if self.max_height <= 0:
            raise ValueError(f"Maximum height must be greater than zero, got {self.max_height}")

    def accepts(self, width: int, height: int) -> bool:
        return 0 < width <= self.max_width and 0 < height <= self.max_height

    def describe(self) -> str:
        return f"{self.max_width}x{self.max_height}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Limits":
        if environ is None:
            environ = os.environ
        return cls(
            max_width=_env_int(environ, MAX_WIDTH_ENV_VAR, DEFAULT_MAX_WIDTH),
            max_height=_env_int(environ, MAX_HEIGHT_ENV_VAR, DEFAULT_MAX_HEIGHT),
        )

    def override(self, max_width: Optional[int] = None, max_height: Optional[int] = None) -> "Limits":
        return Limits(
            max_width=self.max_width if max_width is None else max_width,
            max_height=self.max_height if max_height is None else max_height,
        )


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from exc
    if value <= 0:
        raise ValueError(f"{name} must be greater than zero, got {value}")
    return value
