"""Parents that supply file listings."""

from flatstore.sources.folder import FolderSource

__all__ = ["FolderSource"]
