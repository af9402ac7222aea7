"""Meta and thumb detection for a freshly built collection."""

import logging
from collections.abc import Iterable
from typing import Optional

from flatstore.collection.record import FileRecord
from flatstore.models.file_type import FileType
from flatstore.utils.filetypes import THUMB_EXTENSION, file_extension, file_stem

logger = logging.getLogger(__name__)

RecordIndex = tuple[dict[str, FileRecord], dict[str, FileRecord]]


def thumb_target(record: FileRecord) -> Optional[str]:
    """Return the filename a thumb image would belong to.

    Both ``photo.jpg.thumb`` and ``photo.thumb.jpg`` point at ``photo.jpg``.
    Returns None when the name carries no ``thumb`` token.
    """
    if record.extension == THUMB_EXTENSION:
        return file_stem(record.filename)

    stem = file_stem(record.filename)
    if file_extension(stem) == THUMB_EXTENSION:
        return f"{file_stem(stem)}.{record.extension}"
    return None


def index_records(records: Iterable[FileRecord]) -> RecordIndex:
    """Index records by filename and, for described files, by stem.

    Record files (content and meta) never appear in the stem index.
    """
    by_filename: dict[str, FileRecord] = {}
    by_stem: dict[str, FileRecord] = {}
    for record in records:
        by_filename[record.filename] = record
        if record.type not in (FileType.CONTENT, FileType.META):
            by_stem.setdefault(file_stem(record.filename), record)
    return by_filename, by_stem


def meta_target(record: FileRecord, index: RecordIndex) -> Optional[FileRecord]:
    """Return the file a record file describes, or None.

    A sibling named exactly like the record file's base name wins
    (``photo.jpg.txt`` describes ``photo.jpg``); otherwise a non-record
    sibling with the same stem is used (``photo.txt`` describes ``photo.jpg``).
    """
    by_filename, by_stem = index
    base = record.name
    target = by_filename.get(base) or by_stem.get(base)
    if target is record:
        return None
    return target


def classify(records: Iterable[FileRecord]) -> None:
    """Retype content files describing a sibling to ``meta`` and thumbnails to ``thumb``.

    Args:
        records: Every record of one collection, classified as a snapshot
    """
    records = list(records)
    index = index_records(records)
    by_filename = index[0]

    for record in records:
        if record.type is FileType.CONTENT:
            target = meta_target(record, index)
            if target is not None:
                record.type = FileType.META
                logger.debug(f"{record.filename} is meta for {target.filename}")

        elif record.type is FileType.IMAGE:
            target_name = thumb_target(record)
            target = by_filename.get(target_name) if target_name else None
            if target is not None and target is not record:
                record.type = FileType.THUMB
                logger.debug(f"{record.filename} is a thumb of {target.filename}")
