from __future__ import annotations

from pathlib import Path

import pytest
from cite_remover.errors import CreateError, ReadError, WriteError
from cite_remover.store import FilesystemStore, backup_path, env_extensions
from pytest import MonkeyPatch


def test_lists_matching_documents_recursively(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    for name in ("b.md", "a.MD", "sub/c.md", "a.md.bak", "notes.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")

    store = FilesystemStore(tmp_path)

    assert store.list_documents() == [tmp_path / "a.MD", tmp_path / "b.md", tmp_path / "sub" / "c.md"]


def test_extra_extensions(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "b.md").write_text("", encoding="utf-8")

    store = FilesystemStore(tmp_path, ["txt", ".md"])

    assert store.list_documents() == [tmp_path / "a.txt", tmp_path / "b.md"]


def test_create_never_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "a.md.bak"
    target.write_text("first", encoding="utf-8")

    with pytest.raises(CreateError):
        FilesystemStore(tmp_path).create(target, "second")

    assert target.read_text(encoding="utf-8") == "first"


def test_read_undecodable_document(tmp_path: Path) -> None:
    binary = tmp_path / "a.md"
    binary.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(ReadError) as excinfo:
        FilesystemStore(tmp_path).read(binary)

    assert excinfo.value.path == binary


def test_backup_path_appends_suffix() -> None:
    assert backup_path(Path("vault/note.md")) == Path("vault/note.md.bak")


def test_env_extensions(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("CITE_EXTENSIONS", "md, TXT")

    assert env_extensions("CITE_EXTENSIONS", ".md") == [".md", ".txt"]


def test_hidden_directories_and_uppercase_backups_are_not_listed(tmp_path: Path) -> None:
    for name in (".obsidian/workspace.md", ".trash/old.md", "notes/.draft.md", "a.md.BAK", "b.md"):
        target = tmp_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("", encoding="utf-8")

    store = FilesystemStore(tmp_path, [".md", "bak"])

    assert store.list_documents() == [tmp_path / "b.md"]


def test_unencodable_overwrite_keeps_original_bytes(tmp_path: Path) -> None:
    note = tmp_path / "a.md"
    note.write_bytes(b"original [cite_start] text\n")

    with pytest.raises(WriteError):
        FilesystemStore(tmp_path, encoding="ascii").overwrite(note, "café " * 1000)

    assert note.read_bytes() == b"original [cite_start] text\n"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["a.md"]


def test_failed_replace_keeps_original_bytes(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    note = tmp_path / "a.md"
    note.write_bytes(b"original [cite_start] text\n")

    def fail_replace(src: object, dst: object) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("cite_remover.store.os.replace", fail_replace)

    with pytest.raises(WriteError):
        FilesystemStore(tmp_path).overwrite(note, "original  text\n")

    assert note.read_bytes() == b"original [cite_start] text\n"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["a.md"]


def test_overwrite_keeps_file_mode(tmp_path: Path) -> None:
    note = tmp_path / "a.md"
    note.write_text("x", encoding="utf-8")
    note.chmod(0o640)

    FilesystemStore(tmp_path).overwrite(note, "y")

    assert note.read_text(encoding="utf-8") == "y"
    assert note.stat().st_mode & 0o777 == 0o640


def test_failed_create_removes_partial_file(tmp_path: Path) -> None:
    target = tmp_path / "a.md.bak"

    with pytest.raises(CreateError):
        FilesystemStore(tmp_path, encoding="ascii").create(target, "café")

    assert not target.exists()
