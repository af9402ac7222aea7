"""Sort keys for file collections."""

import re
from enum import Enum
from typing import Any, Callable

_DIGITS = re.compile(r"(\d+)")


class SortMode(str, Enum):
    """How values are compared when sorting."""

    REGULAR = "regular"
    NUMERIC = "numeric"
    STRING = "string"
    NATURAL = "natural"


def natural_key(value: Any) -> list:
    """Split text into digit and non-digit runs so ``img10`` sorts after ``img9``."""
    parts = _DIGITS.split(str(value).lower())
    return [int(part) if index % 2 else part for index, part in enumerate(parts)]


def _numeric(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _regular(value: Any) -> tuple:
    # None sorts before any value
    return (value is not None, value if value is not None else 0)


def sort_key(mode: SortMode | str) -> Callable[[Any], Any]:
    """Return the key function for a sort mode."""
    mode = SortMode(mode)
    if mode is SortMode.NUMERIC:
        return _numeric
    if mode is SortMode.STRING:
        return lambda value: "" if value is None else str(value)
    if mode is SortMode.NATURAL:
        return natural_key
    return _regular
