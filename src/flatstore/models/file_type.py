"""File type tags."""

from enum import Enum


class FileType(str, Enum):
    """Role of a file inside its parent folder.

    Values compare equal to their plain strings, so ``FileType.IMAGE == "image"``.
    """

    CONTENT = "content"
    META = "meta"
    THUMB = "thumb"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
    AUDIO = "audio"
    CODE = "code"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value
