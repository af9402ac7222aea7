"""Folder-backed parents for file collections."""

import logging
import os
from pathlib import Path
from typing import Optional

from flatstore.collection.files import FileCollection
from flatstore.collection.record import ContentFile
from flatstore.config import StoreConfig
from flatstore.content.document import ContentDocument
from flatstore.protocols.text_store import TextStore
from flatstore.storage.txtstore import TxtStore

logger = logging.getLogger(__name__)


class FolderSource:
    """A page-like parent backed by one folder on disk."""

    is_page = True

    def __init__(
        self,
        root: Path | str,
        config: Optional[StoreConfig] = None,
        store: Optional[TextStore] = None,
        identifier: Optional[str] = None,
    ):
        self.root = Path(root)
        self.identifier = identifier or self.root.name
        self.config = config or StoreConfig()
        self.store = store or TxtStore()
        self._collection: Optional[FileCollection] = None

    def __repr__(self) -> str:
        return f"FolderSource({str(self.root)!r})"

    def files(self) -> list[Path]:
        """List the regular, non-hidden files of the folder by name."""
        try:
            with os.scandir(self.root) as entries:
                paths = [
                    Path(entry.path)
                    for entry in entries
                    if not entry.name.startswith(".") and entry.is_file()
                ]
        except OSError as exc:
            logger.warning(f"Cannot list {self.root}: {exc}")
            return []
        return sorted(paths, key=lambda path: path.name)

    def collection(self) -> FileCollection:
        """Return the classified files of this folder."""
        if self._collection is None:
            self._collection = FileCollection(self)
        return self._collection

    def reset(self) -> None:
        """Forget the file listing and parsed documents."""
        logger.debug(f"Resetting {self.root}")
        self._collection = None

    def content(self, language: Optional[str] = None) -> Optional[ContentDocument]:
        """Return the folder's content document for a language.

        Missing translations fall back to the default-language file. A file
        named after the folder's identifier is preferred over other content
        files; without multilang the first content file is used otherwise.
        """
        contents = [record for record in self.collection().contents() if isinstance(record, ContentFile)]
        contents.sort(key=lambda record: record.name != self.identifier)
        if not contents:
            return None
        if not self.config.multilang:
            return contents[0].content()

        language = language or self.config.active_language
        for wanted in (language, self.config.default_language):
            for record in contents:
                if record.language_code() == wanted:
                    return record.content()
        return None

    def default_content(self) -> Optional[ContentDocument]:
        return self.content(self.config.default_language)
