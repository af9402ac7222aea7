"""Local-disk storage for record files."""

import logging
import re
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n----\n\n"

# A value line starting with four dashes would read back as a section break
_DELIMITER_LINE = re.compile(r"([\r\n])(-{4,})")


def encode_record(data: Mapping[str, object]) -> str:
    """Serialize a key/value mapping into the record text format.

    Args:
        data: Field values keyed by field name

    Returns:
        Text with one ``Key: value`` section per entry
    """
    sections = []
    for key, value in data.items():
        label = str(key).strip()
        label = label[:1].upper() + label[1:]
        text = "" if value is None else str(value).strip()
        text = _DELIMITER_LINE.sub(r"\1 \2", text)
        sections.append(f"{label}: {text}")
    return SECTION_SEPARATOR.join(sections) + "\n"


class TxtStore:
    """Reads and writes record files on the local filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: Path | str) -> bytes:
        """Read raw bytes, returning ``b""`` for missing or unreadable files."""
        try:
            return Path(path).read_bytes()
        except FileNotFoundError:
            logger.debug(f"No record file at {path}")
            return b""
        except OSError as exc:
            logger.warning(f"Could not read {path}: {exc}")
            return b""

    def write(self, path: Path | str, data: Mapping[str, object]) -> bool:
        """Write ``data`` as a record file, creating parent folders as needed.

        Returns:
            True if the file was written
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(encode_record(data), encoding=self.encoding)
        except OSError as exc:
            logger.warning(f"Could not write {target}: {exc}")
            return False
        logger.debug(f"Wrote {len(data)} fields to {target}")
        return True
