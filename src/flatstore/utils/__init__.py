"""Utility functions for flatstore."""

from flatstore.utils.filetypes import detect_type, file_extension, file_stem
from flatstore.utils.language import LanguageResolver
from flatstore.utils.sorting import SortMode, natural_key

__all__ = [
    "detect_type",
    "file_extension",
    "file_stem",
    "LanguageResolver",
    "SortMode",
    "natural_key",
]
