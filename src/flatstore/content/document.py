"""Content documents: parsed record files with language fallback.

A content document holds the fields of one record file. It backs the main
content of a folder, the meta information of a single file, or any other
record file. On multi-language stores every document belongs to one language;
fields missing from a translation are looked up in the default-language
document passed in as ``fallback``.
"""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, Optional

from flatstore.config import StoreConfig
from flatstore.errors import ContentWriteError
from flatstore.models.field import Field, normalize_key
from flatstore.parsing.record_parser import parse_record, strip_bom
from flatstore.protocols.parent import ParentContext
from flatstore.protocols.text_store import TextStore
from flatstore.storage.txtstore import TxtStore
from flatstore.utils.filetypes import file_extension, file_stem
from flatstore.utils.language import LanguageResolver

logger = logging.getLogger(__name__)

_UNSET = object()


class ContentDocument:
    """The fields of one record file."""

    def __init__(
        self,
        path: Path | str,
        config: Optional[StoreConfig] = None,
        store: Optional[TextStore] = None,
        identifier: Optional[str] = None,
        fallback: Optional["ContentDocument"] = None,
    ):
        """Create a document for the record file at ``path``.

        Args:
            path: Location of the record file (it does not need to exist)
            config: Store configuration, defaults to ``StoreConfig()``
            store: Storage used for reading and saving
            identifier: Identifier of the owning object, defaults to the name
            fallback: Default-language document used for missing fields
        """
        self.path = Path(path)
        self.filename = self.path.name
        self.extension = file_extension(self.filename)
        self.config = config or StoreConfig()
        self.store = store or TxtStore()
        self.languages = LanguageResolver(self.config)
        self.identifier = identifier or self.name()
        self.fallback = fallback

        self._raw: Optional[str] = None
        self._fields: Optional[dict[str, Field]] = None
        self._language_code: Any = _UNSET
        self._is_default: Optional[bool] = None

    def __repr__(self) -> str:
        return f"ContentDocument({str(self.path)!r})"

    def raw(self) -> str:
        """Return the text of the record file without a byte-order mark."""
        if self._raw is not None:
            return self._raw

        data = self.store.read(self.path)
        self._raw = strip_bom(data.decode("utf-8", errors="replace"))
        return self._raw

    def fields(self) -> dict[str, Field]:
        """Return all fields of this file, keyed by normalized key."""
        if self._fields is not None:
            return self._fields

        raw = self.raw()
        if not raw:
            self._fields = {}
        else:
            self._fields = parse_record(raw, owner=self)
        return self._fields

    def field_names(self) -> list[str]:
        """Return the names of all fields.

        Translations take their field list from the default-language document.
        """
        if self._uses_own_fields() or self.fallback is None:
            return list(self.fields())
        return list(self.fallback.fields())

    def field(self, key: str) -> Optional[Field]:
        """Return the Field for ``key`` from this file only."""
        return self.fields().get(normalize_key(key))

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of a field.

        Translations fall back to the default-language document once. When
        neither has the field, ``default`` is returned.
        """
        key = normalize_key(key)
        own = self.fields().get(key)
        if own is not None:
            return own.value

        if self._uses_own_fields() or self.fallback is None:
            return default

        inherited = self.fallback.fields().get(key)
        return inherited.value if inherited is not None else default

    def set(self, key: str | Mapping[str, Any], value: Any = "") -> None:
        """Set, replace or remove fields in memory.

        Pass a mapping to set several fields at once. A value of None removes
        the field. Call ``save()`` to store the changes.
        """
        fields = self.fields()

        if isinstance(key, Mapping):
            for item_key, item_value in key.items():
                self.set(item_key, item_value)
            return

        key = normalize_key(key)
        if value is None:
            fields.pop(key, None)
        else:
            fields[key] = Field(key, str(value), self)

    def save(self) -> bool:
        """Write the current fields to the record file.

        The file is read again afterwards so memory matches the disk.

        Returns:
            False if the file could not be written
        """
        if not self.store.write(self.path, self.to_dict()):
            return False

        self._raw = None
        self._fields = None
        self.raw()
        self.fields()
        return True

    def to_dict(self) -> dict[str, str]:
        """Return every field value as a plain string."""
        return {key: str(field) for key, field in self.fields().items()}

    def name(self) -> str:
        """Filename without extension and without language code."""
        return self.languages.strip_code(file_stem(self.filename))

    def language_code(self) -> Optional[str]:
        """Language of this file, or None when multilang is off."""
        if not self.config.multilang:
            return None
        if self._language_code is _UNSET:
            self._language_code = self.languages.resolve(self.filename, self.extension)
        return self._language_code

    def is_default_content(self) -> bool:
        """Check if this is the file of the default language."""
        if self._is_default is None:
            self._is_default = self.languages.is_default(self.language_code())
        return self._is_default

    def _uses_own_fields(self) -> bool:
        return not self.config.multilang or self.is_default_content()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self.fields()

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields())

    @classmethod
    def create(cls, parent: ParentContext, data: Optional[Mapping[str, Any]] = None):
        """Create the content file for a folder or the meta file for a file.

        Args:
            parent: Page-like parent or single file the content belongs to
            data: Initial field values

        Returns:
            The parent's content document (pages) or meta document (files)

        Raises:
            ContentWriteError: If the file could not be written
        """
        config = parent.config
        target = Path(parent.root)
        if parent.is_page:
            target = target / parent.identifier

        name = target.name
        if config.multilang:
            name += "." + config.active_language
        name += "." + config.content_extension
        target = target.with_name(name)

        if not parent.store.write(target, dict(data or {})):
            raise ContentWriteError(target)
        logger.info(f"Created {target}")

        parent.reset()
        if parent.is_page:
            return parent.content()
        return parent.meta()
