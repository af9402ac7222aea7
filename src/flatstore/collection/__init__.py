"""File records, classification and collections."""

from flatstore.collection.classifier import classify, thumb_target
from flatstore.collection.files import FileCollection
from flatstore.collection.record import RECORD_FACTORIES, ContentFile, FileRecord, make_record

__all__ = [
    "FileCollection",
    "FileRecord",
    "ContentFile",
    "RECORD_FACTORIES",
    "make_record",
    "classify",
    "thumb_target",
]
