"""Shared fixtures for flatstore tests."""

from pathlib import Path

import pytest

from flatstore.collection import FileCollection
from flatstore.config import StoreConfig
from flatstore.storage import TxtStore


class ListingSource:
    """In-memory file source: a fixed listing, nothing read from disk."""

    is_page = True

    def __init__(self, names, root=Path("/content/page"), config=None, store=None):
        self.root = root
        self.identifier = root.name
        self.config = config or StoreConfig()
        self.store = store or TxtStore()
        self.names = list(names)

    def files(self):
        return [self.root / name for name in self.names]

    def reset(self):
        pass


class FailingStore:
    """Store whose writes always fail."""

    def __init__(self):
        self.writes = []

    def read(self, path):
        return b""

    def write(self, path, data):
        self.writes.append((path, dict(data)))
        return False


@pytest.fixture
def multilang_config():
    return StoreConfig(multilang=True, languages=("en", "de"), default_language="en")


@pytest.fixture
def make_collection():
    def _make(*names, config=None):
        return FileCollection(ListingSource(names, config=config))

    return _make


@pytest.fixture
def write_files(tmp_path):
    """Create files under tmp_path from a name -> text (or bytes) mapping."""

    def _write(files, folder=tmp_path):
        folder.mkdir(parents=True, exist_ok=True)
        for name, content in files.items():
            path = folder / name
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return folder

    return _write


@pytest.fixture
def failing_store():
    return FailingStore()
