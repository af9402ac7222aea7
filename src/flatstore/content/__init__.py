"""Content documents."""

from flatstore.content.document import ContentDocument

__all__ = ["ContentDocument"]
