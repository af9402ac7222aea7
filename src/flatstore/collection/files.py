"""File collections: ordered, typed and searchable sets of file records."""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from flatstore.collection.classifier import classify, index_records, meta_target
from flatstore.collection.record import ContentFile, FileRecord, make_record
from flatstore.errors import CollectionError
from flatstore.models.file_type import FileType
from flatstore.protocols.parent import FileSource
from flatstore.utils.sorting import SortMode, sort_key

logger = logging.getLogger(__name__)

# Keys of adopted records get this prefix
ADOPTED_PREFIX = "_"


class FileCollection:
    """An ordered set of file records keyed by filename.

    Built either from a parent's file listing, which creates the records and
    runs meta/thumb classification, or from existing records, which are
    adopted as they are.
    """

    def __init__(self, source: FileSource | Iterable[FileRecord], parent: Any = None):
        self._data: dict[str, FileRecord] = {}
        self._views: dict[FileType, "FileCollection"] = {}

        if isinstance(source, FileSource):
            self.parent = source
            self._prefix = ""
            for path in source.files():
                record = make_record(path, self, source.config, source.store)
                self._data[record.filename] = record
            classify(self._data.values())
            logger.debug(f"Collected {len(self._data)} files from {source.root}")

        elif isinstance(source, Iterable) and not isinstance(source, (str, bytes)):
            self.parent = parent
            self._prefix = ADOPTED_PREFIX
            for record in source:
                if not isinstance(record, FileRecord):
                    raise CollectionError(
                        f"All files in a collection have to be file records, got {record!r}"
                    )
                self._data[self._prefix + record.filename] = record

        else:
            raise CollectionError(
                "A file collection needs a file source or a list of file records"
            )

    def _adopt(self, records: Iterable[FileRecord]) -> "FileCollection":
        return FileCollection(list(records), parent=self.parent)

    def __repr__(self) -> str:
        return f"FileCollection({self.filenames()!r})"

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(list(self._data.values()))

    def __contains__(self, filename: object) -> bool:
        return isinstance(filename, str) and (self._prefix + filename) in self._data

    def count(self) -> int:
        return len(self._data)

    def filenames(self) -> list[str]:
        return [record.filename for record in self._data.values()]

    def first(self) -> Optional[FileRecord]:
        return next(iter(self._data.values()), None)

    def last(self) -> Optional[FileRecord]:
        return next(reversed(self._data.values()), None)

    def get(self, filename: str) -> Optional[FileRecord]:
        """Return the record with this filename, or None."""
        return self._data.get(self._prefix + filename)

    def add(self, record: FileRecord) -> None:
        """Add or replace a record. Typed views are rebuilt on next access."""
        if not isinstance(record, FileRecord):
            raise CollectionError(f"Cannot add {record!r} to a file collection")
        self._data[self._prefix + record.filename] = record
        self._views.clear()

    def remove(self, filename: str) -> Optional[FileRecord]:
        """Remove a record by filename and return it."""
        record = self._data.pop(self._prefix + filename, None)
        if record is not None:
            self._views.clear()
        return record

    # Typed views

    def _view(self, file_type: FileType) -> "FileCollection":
        if file_type not in self._views:
            self._views[file_type] = self.filter_by("type", file_type)
        return self._views[file_type]

    def images(self) -> "FileCollection":
        return self._view(FileType.IMAGE)

    def has_images(self) -> bool:
        return len(self.images()) > 0

    def videos(self) -> "FileCollection":
        return self._view(FileType.VIDEO)

    def has_videos(self) -> bool:
        return len(self.videos()) > 0

    def documents(self) -> "FileCollection":
        return self._view(FileType.DOCUMENT)

    def has_documents(self) -> bool:
        return len(self.documents()) > 0

    def audio(self) -> "FileCollection":
        return self._view(FileType.AUDIO)

    def has_audio(self) -> bool:
        return len(self.audio()) > 0

    sounds = audio
    has_sounds = has_audio

    def code(self) -> "FileCollection":
        return self._view(FileType.CODE)

    def has_code(self) -> bool:
        return len(self.code()) > 0

    def unknown(self) -> "FileCollection":
        return self._view(FileType.UNKNOWN)

    def has_unknown(self) -> bool:
        return len(self.unknown()) > 0

    others = unknown
    has_others = has_unknown

    def thumbs(self) -> "FileCollection":
        return self._view(FileType.THUMB)

    def has_thumbs(self) -> bool:
        return len(self.thumbs()) > 0

    def metas(self) -> "FileCollection":
        return self._view(FileType.META)

    def has_metas(self) -> bool:
        return len(self.metas()) > 0

    def contents(self) -> "FileCollection":
        return self._view(FileType.CONTENT)

    def has_contents(self) -> bool:
        return len(self.contents()) > 0

    # Searching

    def find(self, *filenames: str):
        """Find one or several files by filename.

        Args:
            filenames: Zero, one or several filenames

        Returns:
            This collection for no argument, a record (or None) for one
            filename, a new collection of the existing matches (or None) for
            several filenames
        """
        if not filenames:
            return self
        if len(filenames) == 1:
            return self.get(filenames[0])

        found = [record for record in map(self.get, filenames) if record is not None]
        if not found:
            return None
        return self._adopt(found)

    def filter_by(self, key: str, value: Any) -> "FileCollection":
        """Return a new collection of records whose ``key`` equals ``value``."""
        return self._adopt(record for record in self._data.values() if _value_of(record, key) == value)

    def find_by(self, key: str, value: Any):
        """Find records by the value of one of their attributes.

        Args:
            key: Attribute such as ``extension``, ``type`` or ``name``
            value: A single value or a list of accepted values

        Returns:
            A new collection for several values, otherwise the first matching
            record or None
        """
        if isinstance(value, (list, tuple, set, frozenset)):
            values = list(value)
            if len(values) > 1:
                return self._adopt(
                    record for record in self._data.values() if _value_of(record, key) in values
                )
            if not values:
                return None
            value = values[0]

        return next(
            (record for record in self._data.values() if _value_of(record, key) == value),
            None,
        )

    def find_by_extension(self, *extensions: str):
        return self.find_by("extension", [ext.lstrip(".").lower() for ext in extensions])

    def find_by_type(self, *types: FileType | str):
        return self.find_by("type", list(types))

    def sort_by(
        self,
        field: str,
        direction: str = "asc",
        mode: SortMode | str = SortMode.REGULAR,
    ) -> "FileCollection":
        """Return a new collection sorted by a record attribute.

        The sort is stable: records with equal values keep their order in
        both directions.
        """
        key = sort_key(mode)
        ordered = sorted(
            self._data.values(),
            key=lambda record: key(_value_of(record, field)),
            reverse=direction.lower() == "desc",
        )
        return self._adopt(ordered)

    # Languages

    def default_sibling(self, record: FileRecord) -> Optional[ContentFile]:
        """Return the default-language file sharing ``record``'s base name.

        Returns None when multilang is off, when ``record`` is itself the
        default-language file, or when no such sibling exists.
        """
        if not isinstance(record, ContentFile) or not record.config.multilang:
            return None
        if record.is_default_content():
            return None

        for candidate in self._data.values():
            if (
                candidate is not record
                and isinstance(candidate, ContentFile)
                and candidate.type is record.type
                and candidate.name == record.name
                and candidate.is_default_content()
            ):
                return candidate
        return None

    def meta_files(self, record: FileRecord) -> list[ContentFile]:
        """Return the meta files describing ``record``, one per language."""
        index = index_records(self._data.values())
        return [
            candidate
            for candidate in self._data.values()
            if candidate.type is FileType.META
            and isinstance(candidate, ContentFile)
            and meta_target(candidate, index) is record
        ]

    def summary(self) -> dict[str, int]:
        """Count files per type."""
        counts = {"total": len(self)}
        for file_type in FileType:
            counts[file_type.value] = len(self._view(file_type))
        return counts


def _value_of(record: FileRecord, key: str) -> Any:
    value = getattr(record, key, None)
    return value() if callable(value) else value
