from flatstore.parsing import parse_record
from flatstore.storage import TxtStore, encode_record


def test_encode_record_format():
    text = encode_record({"title": "Hello", "text": "Body"})

    assert text == "Title: Hello\n\n----\n\nText: Body\n"


def test_encode_indents_dash_lines_in_values():
    text = encode_record({"text": "a\n----\nb"})

    fields = parse_record(text)
    assert list(fields) == ["text"]
    assert fields["text"].value == "a\n ----\nb"


def test_encode_indents_dash_lines_after_bare_carriage_return():
    text = encode_record({"text": "a\r----\rb", "title": "T"})

    fields = parse_record(text)
    assert list(fields) == ["text", "title"]
    assert fields["text"].value == "a\r ----\rb"


def test_write_creates_folders_and_reads_back(tmp_path):
    store = TxtStore()
    path = tmp_path / "blog" / "article" / "article.txt"

    assert store.write(path, {"title": "Hi", "count": 3})

    fields = parse_record(store.read(path).decode("utf-8"))
    assert fields["title"].value == "Hi"
    assert fields["count"].value == "3"


def test_read_missing_file_returns_empty_bytes(tmp_path):
    assert TxtStore().read(tmp_path / "missing.txt") == b""


def test_write_failure_returns_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder")

    assert TxtStore().write(blocker / "page.txt", {"title": "x"}) is False
