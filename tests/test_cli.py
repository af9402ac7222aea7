import sys

import pytest

from flatstore import cli


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["flatstore", *map(str, args)])
    cli.main()


def test_ls(monkeypatch, capsys, write_files):
    folder = write_files({"page.txt": "Title: A", "photo.jpg": b"", "photo.jpg.txt": "Caption: x"})

    run_cli(monkeypatch, "ls", folder, "--sort", "filename", "--desc")

    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["photo.jpg.txt", "photo.jpg", "page.txt"]
    assert lines[0].split()[1] == "meta"


def test_ls_by_type(monkeypatch, capsys, write_files):
    folder = write_files({"page.txt": "Title: A", "photo.jpg": b""})

    run_cli(monkeypatch, "ls", folder, "--type", "image")

    assert capsys.readouterr().out.split() == ["photo.jpg", "image"]


def test_set_then_get(monkeypatch, capsys, write_files):
    folder = write_files({"page.txt": "Title: A"})

    run_cli(monkeypatch, "set", folder / "page.txt", "title=B", "text=Hello")
    run_cli(monkeypatch, "get", folder / "page.txt", "title")

    assert capsys.readouterr().out.strip() == "B"
    assert "Text: Hello" in (folder / "page.txt").read_text(encoding="utf-8")


def test_set_creates_meta_file(monkeypatch, write_files):
    folder = write_files({"photo.jpg": b""})

    run_cli(monkeypatch, "set", folder / "photo.jpg", "caption=Sunset")

    assert (folder / "photo.jpg.txt").read_text(encoding="utf-8") == "Caption: Sunset\n"


def test_set_updates_meta_named_after_stem(monkeypatch, write_files):
    folder = write_files({"photo.jpg": b"", "photo.txt": "Alt: Red"})

    run_cli(monkeypatch, "set", folder / "photo.jpg", "caption=Sunset")

    assert (folder / "photo.txt").read_text(encoding="utf-8") == "Alt: Red\n\n----\n\nCaption: Sunset\n"
    assert not (folder / "photo.jpg.txt").exists()


def test_fields(monkeypatch, capsys, write_files):
    folder = write_files({"page.txt": "Title: A\n----\nText: B"})

    run_cli(monkeypatch, "fields", folder / "page.txt")

    assert capsys.readouterr().out.splitlines() == ["title: A", "text: B"]


def test_get_missing_field_exits(monkeypatch, write_files):
    folder = write_files({"page.txt": "Title: A"})

    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "get", folder / "page.txt", "nothing")


def test_info(monkeypatch, capsys, write_files):
    folder = write_files({"page.txt": "Title: A", "photo.jpg": b""})

    run_cli(monkeypatch, "info", folder)

    out = capsys.readouterr().out
    assert "Total: 2" in out
    assert "image: 1" in out
