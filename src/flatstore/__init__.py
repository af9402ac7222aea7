"""flatstore - structured content from plain text files."""

from flatstore.collection import ContentFile, FileCollection, FileRecord
from flatstore.config import StoreConfig
from flatstore.content import ContentDocument
from flatstore.errors import CollectionError, ContentWriteError, FlatStoreError
from flatstore.models import Field, FileType
from flatstore.sources import FolderSource
from flatstore.storage import TxtStore

__all__ = [
    "ContentDocument",
    "ContentFile",
    "CollectionError",
    "ContentWriteError",
    "Field",
    "FileCollection",
    "FileRecord",
    "FileType",
    "FlatStoreError",
    "FolderSource",
    "StoreConfig",
    "TxtStore",
]
