"""Store configuration.

Values can be passed explicitly or read from ``FLATSTORE_*`` environment
variables (list values as JSON, e.g. ``FLATSTORE_LANGUAGES='["en", "de"]'``).
"""

from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseSettings):
    """Settings shared by sources, collections and content documents."""

    model_config = SettingsConfigDict(
        env_prefix="FLATSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # === LANGUAGES ===
    multilang: bool = False
    languages: tuple[str, ...] = ()
    default_language: str = "en"
    current_language: Optional[str] = None

    # === CONTENT FILES ===
    content_extension: str = "txt"

    # === LOGGING ===
    log_level: str = "INFO"

    @field_validator("languages", mode="before")
    @classmethod
    def _lowercase_languages(cls, value):
        if isinstance(value, str):
            value = [part for part in value.split(",") if part.strip()]
        return tuple(code.strip().lower() for code in value)

    @field_validator("default_language", "current_language")
    @classmethod
    def _lowercase_code(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if value else value

    @field_validator("content_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.lstrip(".").lower()

    @model_validator(mode="after")
    def _check_default_language(self) -> "StoreConfig":
        if self.multilang and self.default_language not in self.languages:
            raise ValueError(
                f"default_language {self.default_language!r} is not one of {list(self.languages)}"
            )
        return self

    @property
    def active_language(self) -> str:
        """Language used for new content files."""
        return self.current_language or self.default_language
