"""Data models for flatstore."""

from flatstore.models.field import Field, normalize_key
from flatstore.models.file_type import FileType

__all__ = ["Field", "FileType", "normalize_key"]
