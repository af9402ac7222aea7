"""Protocol definitions for external collaborators."""

from flatstore.protocols.parent import FileSource, ParentContext
from flatstore.protocols.text_store import TextStore

__all__ = ["TextStore", "ParentContext", "FileSource"]
