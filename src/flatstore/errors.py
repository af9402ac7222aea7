"""Exceptions raised by flatstore."""


class FlatStoreError(Exception):
    """Base class for flatstore errors."""


class ContentWriteError(FlatStoreError):
    """A new content file could not be written."""

    def __init__(self, path, message: str = "The content file could not be created"):
        self.path = path
        super().__init__(f"{message}: {path}")


class CollectionError(FlatStoreError, TypeError):
    """A file collection was built from unsupported input."""
