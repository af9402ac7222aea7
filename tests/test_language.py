from flatstore.config import StoreConfig
from flatstore.utils.language import (
    LanguageResolver,
    extract_code,
    is_default,
    resolve,
    strip_code,
)


def test_extract_code():
    assert extract_code("article.de.txt", "txt") == "de"
    assert extract_code("article.DE.txt", "txt") == "de"
    assert extract_code("article.txt", "txt") is None
    assert extract_code("article.deu.txt", "txt") is None
    assert extract_code("photo.jpg.fr.md", "md") == "fr"


def test_resolve_valid_code():
    assert resolve("article.de.txt", "txt", ["en", "de"], "en") == "de"


def test_resolve_unknown_or_missing_code_falls_back_to_default():
    assert resolve("article.fr.txt", "txt", ["en", "de"], "en") == "en"
    assert resolve("article.txt", "txt", ["en", "de"], "en") == "en"


def test_resolve_without_multilang():
    assert resolve("article.de.txt", "txt", ["en", "de"], "en", multilang=False) is None


def test_is_default():
    assert is_default("en", "en")
    assert not is_default("de", "en")
    assert not is_default(None, "en")


def test_strip_code():
    assert strip_code("photo.jpg.de", ["en", "de"]) == "photo.jpg"
    assert strip_code("photo.jpg.DE", ["en", "de"]) == "photo.jpg"
    assert strip_code("photo.jpg.fr", ["en", "de"]) == "photo.jpg.fr"
    assert strip_code("photo", []) == "photo"


def test_resolver_bound_to_config(multilang_config):
    resolver = LanguageResolver(multilang_config)

    assert resolver.resolve("a.de.txt", "txt") == "de"
    assert resolver.is_default("en")
    assert resolver.strip_code("a.de") == "a"


def test_resolver_without_multilang_keeps_names():
    resolver = LanguageResolver(StoreConfig())

    assert resolver.resolve("a.de.txt", "txt") is None
    assert resolver.strip_code("a.de") == "a.de"
