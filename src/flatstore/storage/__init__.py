"""Record file storage."""

from flatstore.storage.txtstore import TxtStore, encode_record

__all__ = ["TxtStore", "encode_record"]
