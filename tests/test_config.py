import pytest
from pydantic import ValidationError

from flatstore.config import StoreConfig


def test_defaults():
    config = StoreConfig()

    assert config.multilang is False
    assert config.languages == ()
    assert config.default_language == "en"
    assert config.content_extension == "txt"
    assert config.active_language == "en"


def test_values_are_normalized():
    config = StoreConfig(
        multilang=True,
        languages="EN, de",
        default_language="EN",
        current_language="DE",
        content_extension=".MD",
    )

    assert config.languages == ("en", "de")
    assert config.default_language == "en"
    assert config.active_language == "de"
    assert config.content_extension == "md"


def test_default_language_must_be_configured():
    with pytest.raises(ValidationError):
        StoreConfig(multilang=True, languages=["de"], default_language="en")


def test_config_is_frozen():
    config = StoreConfig()

    with pytest.raises(ValidationError):
        config.multilang = True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("FLATSTORE_MULTILANG", "true")
    monkeypatch.setenv("FLATSTORE_LANGUAGES", '["en", "fr"]')
    monkeypatch.setenv("FLATSTORE_DEFAULT_LANGUAGE", "fr")

    config = StoreConfig()

    assert config.multilang is True
    assert config.languages == ("en", "fr")
    assert config.default_language == "fr"
