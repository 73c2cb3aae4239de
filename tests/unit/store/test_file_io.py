"""Unit tests for filesystem primitives."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.errors import (
    CopyError,
    DeleteError,
    DirectoryCreateFailedError,
    DocumentNotFoundError,
    ReadError,
    SourceNotFoundError,
    WriteError,
)
from store import file_io


def test_exists_reports_files_and_directories(tmp_path: Path) -> None:
    document_path = tmp_path / "a.json"
    document_path.write_bytes(b"{}")

    assert file_io.exists(document_path) and file_io.exists(tmp_path)


def test_exists_never_raises_for_odd_paths(tmp_path: Path) -> None:
    """Missing paths, including ones below a file, should report False."""
    file_path = tmp_path / "file"
    file_path.write_bytes(b"x")

    assert not file_io.exists(tmp_path / "missing") and not file_io.exists(file_path / "child")


def test_exists_treats_permission_error_as_absent(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Unreadable paths should be reported absent instead of raising."""

    def denied_stat(path: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr("store.file_io.os.stat", denied_stat)

    assert file_io.exists(tmp_path / "a.json") is False


def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    directory = tmp_path / "Docs"

    file_io.ensure_directory(directory)
    file_io.ensure_directory(directory)

    assert directory.is_dir()


def test_ensure_directory_does_not_create_parents(tmp_path: Path) -> None:
    """Directory creation should be one level only."""
    with pytest.raises(DirectoryCreateFailedError):
        file_io.ensure_directory(tmp_path / "missing-parent" / "Docs")

    assert not (tmp_path / "missing-parent").exists()


def test_ensure_directory_fails_when_file_in_the_way(tmp_path: Path) -> None:
    blocker = tmp_path / "Docs"
    blocker.write_bytes(b"")

    with pytest.raises(DirectoryCreateFailedError):
        file_io.ensure_directory(blocker)


def test_write_atomic_replaces_content_without_leftovers(tmp_path: Path) -> None:
    """Atomic writes should replace content and leave no temp files behind."""
    document_path = tmp_path / "user.json"
    file_io.write_atomic(document_path, b"first")

    file_io.write_atomic(document_path, b"second")

    assert document_path.read_bytes() == b"second" and os.listdir(tmp_path) == ["user.json"]


def test_write_atomic_cleans_up_when_replace_fails(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """A failed rename should raise WriteError and discard the temp file."""

    def failing_replace(source: object, destination: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("store.file_io.os.replace", failing_replace)

    with pytest.raises(WriteError):
        file_io.write_atomic(tmp_path / "user.json", b"{}")

    assert os.listdir(tmp_path) == []


def test_write_atomic_fails_for_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(WriteError):
        file_io.write_atomic(tmp_path / "missing" / "user.json", b"{}")


def test_read_all_distinguishes_missing_and_unreadable(tmp_path: Path) -> None:
    """Missing files raise DocumentNotFoundError; directories raise ReadError."""
    with pytest.raises(DocumentNotFoundError):
        file_io.read_all(tmp_path / "missing.json")

    with pytest.raises(ReadError):
        file_io.read_all(tmp_path)


def test_remove_deletes_directory_subtree(tmp_path: Path) -> None:
    directory = tmp_path / "Docs"
    directory.mkdir()
    (directory / "a.json").write_bytes(b"{}")
    (directory / "b.json").write_bytes(b"[]")

    file_io.remove(directory)

    assert not directory.exists()


def test_remove_missing_path_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        file_io.remove(tmp_path / "missing.json")


def test_remove_wraps_os_errors(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Non-missing deletion failures should raise DeleteError."""
    document_path = tmp_path / "a.json"
    document_path.write_bytes(b"{}")

    def failing_unlink(self: Path, missing_ok: bool = False) -> None:
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "unlink", failing_unlink)

    with pytest.raises(DeleteError):
        file_io.remove(document_path)


def test_copy_replaces_existing_destination(tmp_path: Path) -> None:
    """Copy should leave the destination mirroring the source."""
    source = tmp_path / "source.json"
    destination = tmp_path / "destination.json"
    source.write_bytes(b'{"a": 1}')
    destination.write_bytes(b'{"stale": true}')

    file_io.copy(source, destination)

    assert destination.read_bytes() == source.read_bytes()


def test_copy_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError):
        file_io.copy(tmp_path / "missing.json", tmp_path / "destination.json")


def test_copy_into_missing_directory_raises_copy_error(tmp_path: Path) -> None:
    source = tmp_path / "source.json"
    source.write_bytes(b"{}")

    with pytest.raises(CopyError):
        file_io.copy(source, tmp_path / "missing" / "destination.json")
