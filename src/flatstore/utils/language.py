"""Language codes embedded in filenames (``name.<code>.<ext>``)."""

import re
from collections.abc import Iterable
from typing import Optional

from flatstore.config import StoreConfig


def extract_code(filename: str, extension: str) -> Optional[str]:
    """Return the two-letter language code of ``filename``, if it has one.

    Args:
        filename: File name such as ``article.de.txt``
        extension: Extension without dot, e.g. ``txt``

    Returns:
        The lowercased code or None
    """
    pattern = rf"\.([a-z]{{2}})\.{re.escape(extension)}$"
    match = re.search(pattern, filename, re.IGNORECASE)
    return match.group(1).lower() if match else None


def resolve(
    filename: str,
    extension: str,
    valid_codes: Iterable[str],
    default_code: str,
    multilang: bool = True,
) -> Optional[str]:
    """Determine the language a file is written in.

    Returns None when multilang is off. Files without a valid code belong to
    the default language.
    """
    if not multilang:
        return None
    code = extract_code(filename, extension)
    if code is not None and code in valid_codes:
        return code
    return default_code


def is_default(code: Optional[str], default_code: str) -> bool:
    return code == default_code


def strip_code(name: str, codes: Iterable[str]) -> str:
    """Remove a trailing ``.<code>`` for any of ``codes`` from ``name``."""
    codes = [re.escape(code) for code in codes]
    if not codes:
        return name
    return re.sub(rf"\.({'|'.join(codes)})$", "", name, flags=re.IGNORECASE)


class LanguageResolver:
    """Language helpers bound to a store configuration."""

    def __init__(self, config: StoreConfig):
        self.config = config

    def extract_code(self, filename: str, extension: str) -> Optional[str]:
        return extract_code(filename, extension)

    def resolve(self, filename: str, extension: str) -> Optional[str]:
        return resolve(
            filename,
            extension,
            self.config.languages,
            self.config.default_language,
            multilang=self.config.multilang,
        )

    def is_default(self, code: Optional[str]) -> bool:
        return is_default(code, self.config.default_language)

    def strip_code(self, name: str) -> str:
        """Strip a language suffix, only when multilang is on."""
        if not self.config.multilang:
            return name
        return strip_code(name, self.config.languages)
