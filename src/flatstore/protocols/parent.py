"""Protocols for the objects that own content files."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from flatstore.config import StoreConfig
from flatstore.protocols.text_store import TextStore


@runtime_checkable
class ParentContext(Protocol):
    """Anything a content file can be created for.

    Page-like parents (``is_page``) store their content file inside ``root``
    under ``identifier``. Other parents (single files) store a meta file next
    to ``root``.
    """

    root: Path
    identifier: str
    is_page: bool
    config: StoreConfig
    store: TextStore

    def reset(self) -> None:
        """Drop cached listings and documents after the folder changed."""
        ...


@runtime_checkable
class FileSource(ParentContext, Protocol):
    """A parent that can list its physical files."""

    def files(self) -> list[Path]:
        """Return the paths of all files belonging to this parent."""
        ...
