import dataclasses

import pytest

from flatstore.models import Field, normalize_key
from flatstore.parsing import parse_record, split_sections, strip_bom


def test_parses_sections_into_fields():
    raw = "Title: Hello World\n\n----\n\nText: Some text\nover two lines"

    fields = parse_record(raw)

    assert list(fields) == ["title", "text"]
    assert fields["title"].value == "Hello World"
    assert fields["text"].value == "Some text\nover two lines"


def test_value_keeps_colons_after_the_first():
    fields = parse_record("Link: https://example.com:8080/path")

    assert fields["link"].value == "https://example.com:8080/path"


def test_keys_are_normalized():
    fields = parse_record("  Published At : 2024\n----\nSEO-Title!!: x")

    assert set(fields) == {"published_at", "seo_title_"}


def test_normalize_key_collapses_runs():
    assert normalize_key("Hello   -- World") == "hello_world"
    assert normalize_key("  title ") == "title"
    assert normalize_key("   ") == ""


def test_later_duplicate_section_wins():
    raw = "Title: First\n----\nText: body\n----\ntitle: Second"

    fields = parse_record(raw)

    assert list(fields) == ["title", "text"]
    assert fields["title"].value == "Second"


def test_sections_without_key_are_skipped():
    raw = "Title: A\n----\n: no key\n----\n\n----\nText: B"

    fields = parse_record(raw)

    assert list(fields) == ["title", "text"]


def test_delimiter_needs_four_dashes_after_line_break():
    raw = "Text: a\n---\nb ---- c\n----\nTitle: t"

    sections = split_sections(raw)

    assert len(sections) == 2
    assert parse_record(raw)["text"].value == "a\n---\nb ---- c"


def test_windows_line_breaks():
    fields = parse_record("Title: A\r\n\r\n----\r\n\r\nText: B\r\n")

    assert fields["title"].value == "A"
    assert fields["text"].value == "B"


def test_empty_input_gives_no_fields():
    assert parse_record("") == {}
    assert parse_record("\ufeff") == {}


def test_bom_is_stripped():
    plain = "Title: Hello\n----\nText: x"

    assert parse_record("\ufeff" + plain) == parse_record(plain)
    assert strip_bom("\ufeffabc") == "abc"


def test_fields_reference_their_owner():
    owner = object()

    field = parse_record("Title: A", owner=owner)["title"]

    assert field.owner is owner
    assert field == Field("title", "A")
    assert str(field) == "A"


def test_field_is_immutable():
    field = Field("title", "A")

    with pytest.raises(dataclasses.FrozenInstanceError):
        field.value = "B"


def test_field_helpers():
    assert Field("text", "  ").is_empty()
    assert Field("text", "a\nb").lines() == ["a", "b"]
