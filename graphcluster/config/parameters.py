"""Typed access to string-keyed algorithm parameters."""

import os
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, TypeVar

from ..core.errors import ConfigurationError

T = TypeVar("T")


class Parameters:
    """
    Read-only view over the string parameters of one algorithm.

    Every getter parses the raw string value and reports malformed values
    as ``ConfigurationError`` naming the parameter and the algorithm.
    """

    def __init__(self, algorithm: str, values: Optional[Mapping[str, str]] = None):
        self.algorithm = algorithm
        self._values: Dict[str, str] = dict(values or {})

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"Parameters({self.algorithm!r}, {self._values!r})"

    def _parse(self, name: str, parser: Callable[[str], T], kind: str, default: Optional[T]) -> Optional[T]:
        if name not in self._values:
            return default
        raw = self._values[name]
        try:
            return parser(raw)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Parameter '{name}' of algorithm '{self.algorithm}' "
                f"must be {kind}, got {raw!r}"
            ) from e

    def require(self, name: str) -> str:
        """Return a raw value that must be present."""
        if name not in self._values:
            raise ConfigurationError(
                f"Parameter '{name}' of algorithm '{self.algorithm}' is required"
            )
        return self._values[name]

    def get_str(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(name, default)

    def get_int(self, name: str, default: Optional[int] = None) -> Optional[int]:
        return self._parse(name, int, "an integer", default)

    def get_float(self, name: str, default: Optional[float] = None) -> Optional[float]:
        return self._parse(name, float, "a real number", default)

    def get_path(self, name: str, default: Optional[Path] = None) -> Optional[Path]:
        return self._parse(name, _parse_path, "a file path", default)

    def get_threads(self, name: str = "threads") -> int:
        """Thread count, defaulting to the number of available processors."""
        return self._parse(name, _parse_threads, "a positive integer", os.cpu_count() or 1)


def _parse_path(raw: str) -> Path:
    if not raw.strip():
        raise ValueError("empty path")
    return Path(raw)


def _parse_threads(raw: str) -> int:
    threads = int(raw)
    if threads < 1:
        raise ValueError("thread count must be positive")
    return threads
