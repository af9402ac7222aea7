"""Protocol for byte-level record storage."""

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextStore(Protocol):
    """Protocol for reading and writing record files.

    Implementations decide where bytes live (local disk, memory, ...).
    Uses structural subtyping - no inheritance required.
    """

    def read(self, path: Path) -> bytes:
        """Return the raw bytes at ``path``, or ``b""`` when missing."""
        ...

    def write(self, path: Path, data: Mapping[str, str]) -> bool:
        """Serialize ``data`` in the record format and write it to ``path``.

        Returns False instead of raising when the write fails.
        """
        ...
