"""Parsed key/value pairs from record files."""

import re
from dataclasses import dataclass, field
from typing import Any

_NON_KEY_CHARS = re.compile(r"[^a-z0-9]+")


def normalize_key(raw: str) -> str:
    """Normalize a raw section key.

    Lowercases the trimmed key and collapses every run of characters outside
    ``[a-z0-9]`` into a single underscore, so ``"Published At"`` becomes
    ``"published_at"``.
    """
    return _NON_KEY_CHARS.sub("_", raw.strip().lower())


@dataclass(frozen=True)
class Field:
    """One field of a record file."""

    key: str
    value: str
    owner: Any = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.value

    def is_empty(self) -> bool:
        """Check if the value is blank."""
        return not self.value.strip()

    def lines(self) -> list[str]:
        """Split the value into lines."""
        return self.value.splitlines()
