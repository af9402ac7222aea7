"""File records: one physical file inside a parent folder."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from flatstore.config import StoreConfig
from flatstore.content.document import ContentDocument
from flatstore.models.file_type import FileType
from flatstore.protocols.text_store import TextStore
from flatstore.storage.txtstore import TxtStore
from flatstore.utils.filetypes import detect_type, file_extension, file_stem
from flatstore.utils.language import LanguageResolver

if TYPE_CHECKING:
    from flatstore.collection.files import FileCollection

logger = logging.getLogger(__name__)


class FileRecord:
    """A single file with its name, extension and type tag.

    The type tag is set from the extension on construction and may be changed
    to ``meta`` or ``thumb`` by the collection's classification pass.
    """

    is_page = False

    def __init__(
        self,
        path: Path | str,
        collection: Optional["FileCollection"] = None,
        config: Optional[StoreConfig] = None,
        store: Optional[TextStore] = None,
        file_type: Optional[FileType] = None,
    ):
        self.path = Path(path)
        self.filename = self.path.name
        self.extension = file_extension(self.filename)
        self.collection = collection
        self.config = config or StoreConfig()
        self.store = store or TxtStore()
        self.type = file_type or detect_type(self.filename, self.config.content_extension)
        self._metas: dict[Optional[str], Optional[ContentDocument]] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.filename!r}, type={self.type.value!r})"

    def __str__(self) -> str:
        return self.filename

    @property
    def root(self) -> Path:
        return self.path

    @property
    def identifier(self) -> str:
        return self.filename

    @property
    def name(self) -> str:
        """Filename without its last extension."""
        return file_stem(self.filename)

    @property
    def size(self) -> Optional[int]:
        """File size in bytes, or None if the file cannot be stat'ed."""
        try:
            return self.path.stat().st_size
        except OSError:
            return None

    @property
    def modified(self) -> Optional[float]:
        """Modification time as a timestamp, or None if unavailable."""
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def meta(self, language: Optional[str] = None) -> Optional[ContentDocument]:
        """Return the meta document describing this file.

        Meta files are looked up among the collection's ``meta`` records, so
        ``photo.txt`` is found for ``photo.jpg`` just like ``photo.jpg.txt``.
        Files outside a collection, or meta files written after the listing,
        are found by name: ``<filename>.<ext>`` or, on multi-language stores,
        ``<filename>.<code>.<ext>``. Translations fall back to the
        default-language meta file.

        Returns:
            The document, or None if no meta file exists
        """
        config = self.config
        if config.multilang:
            language = language or config.active_language
        else:
            language = None

        if language in self._metas:
            return self._metas[language]

        document = None
        path = self._find_meta(language)
        if path is not None:
            fallback = None
            if language is not None and language != config.default_language:
                fallback = self.meta(config.default_language)
            document = ContentDocument(
                path, config, self.store, identifier=self.filename, fallback=fallback
            )
        elif language is not None and language != config.default_language:
            document = self.meta(config.default_language)

        self._metas[language] = document
        return document

    def reset(self) -> None:
        """Forget cached meta documents."""
        self._metas.clear()

    def _find_meta(self, language: Optional[str]) -> Optional[Path]:
        if self.collection is not None:
            for meta_file in self.collection.meta_files(self):
                if meta_file.language_code() == language:
                    return meta_file.path

        candidates = [self._meta_path(language)]
        # Meta files without a code belong to the default language
        if language is not None and language == self.config.default_language:
            candidates.append(self._meta_path(None))
        return next((path for path in candidates if path.is_file()), None)

    def _meta_path(self, language: Optional[str]) -> Path:
        parts = [self.filename]
        if language is not None:
            parts.append(language)
        parts.append(self.config.content_extension)
        return self.path.with_name(".".join(parts))


class ContentFile(FileRecord):
    """A record file that can be parsed into a content document."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.languages = LanguageResolver(self.config)
        self._document: Optional[ContentDocument] = None

    @property
    def name(self) -> str:
        """Filename without extension and without language code."""
        return self.languages.strip_code(file_stem(self.filename))

    def language_code(self) -> Optional[str]:
        return self.languages.resolve(self.filename, self.extension)

    def is_default_content(self) -> bool:
        return self.languages.is_default(self.language_code())

    def content(self) -> ContentDocument:
        """Return the parsed document of this file.

        On multi-language stores the default-language sibling from the same
        collection is wired in as fallback.
        """
        if self._document is not None:
            return self._document

        fallback = None
        if self.collection is not None:
            sibling = self.collection.default_sibling(self)
            if sibling is not None:
                fallback = sibling.content()

        self._document = ContentDocument(
            self.path, self.config, self.store, fallback=fallback
        )
        return self._document

    def reset(self) -> None:
        super().reset()
        self._document = None


# Record class per initial type; types not listed use FileRecord
RECORD_FACTORIES: dict[FileType, type[FileRecord]] = {
    FileType.CONTENT: ContentFile,
}


def make_record(
    path: Path | str,
    collection: Optional["FileCollection"] = None,
    config: Optional[StoreConfig] = None,
    store: Optional[TextStore] = None,
) -> FileRecord:
    """Build the record for ``path`` using the class registered for its type."""
    config = config or StoreConfig()
    file_type = detect_type(Path(path).name, config.content_extension)
    factory = RECORD_FACTORIES.get(file_type, FileRecord)
    return factory(path, collection, config, store, file_type=file_type)
