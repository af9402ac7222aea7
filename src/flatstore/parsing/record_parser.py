"""Record text parsing.

A record file is a list of sections separated by a line break followed by
four or more dashes. Each section holds ``key: value``; the value is
everything after the first colon and may span lines.
"""

import re
from typing import Any

from flatstore.models.field import Field, normalize_key

BOM = "\ufeff"

_SECTION_BREAK = re.compile(r"[\r\n]+-{4,}")


def strip_bom(raw: str) -> str:
    """Remove leading byte-order marks."""
    return raw.lstrip(BOM)


def split_sections(raw: str) -> list[str]:
    """Split record text at section delimiters."""
    return _SECTION_BREAK.split(raw)


def parse_record(raw: str, owner: Any = None) -> dict[str, Field]:
    """Parse record text into fields keyed by normalized key.

    Sections without a usable key are skipped. When two sections normalize to
    the same key the later one wins.

    Args:
        raw: Record text, possibly starting with a BOM
        owner: Document the fields belong to

    Returns:
        Ordered mapping of key to Field
    """
    raw = strip_bom(raw)
    fields: dict[str, Field] = {}
    if not raw:
        return fields

    for section in split_sections(raw):
        raw_key, _, raw_value = section.partition(":")
        key = normalize_key(raw_key)
        if not key:
            continue
        fields[key] = Field(key, raw_value.strip(), owner)

    return fields
