"""Unit tests for CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from core.config import StoreConfig
from store.object_store import ObjectStore
from tests.fixture_paths import bundle_root


@pytest.fixture(autouse=True)
def _clear_store_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in (
        "CODABLE_FILES_ROOT",
        "CODABLE_FILES_APP_NAME",
        "CODABLE_FILES_DEFAULT_DIRECTORY",
        "CODABLE_FILES_BUNDLE_DIR",
    ):
        monkeypatch.delenv(variable, raising=False)


def _root(tmp_path: Path) -> Path:
    root = tmp_path / "Documents"
    root.mkdir()
    return root


def test_cli_show_prints_saved_document(tmp_path: Path, capsys) -> None:
    """Show command should print the stored JSON document."""
    root = _root(tmp_path)
    ObjectStore(StoreConfig(documents_root=root)).save({"firstName": "A"}, "user", "T")

    exit_code = main(["--root", str(root), "show", "user", "--directory", "T"])
    output = capsys.readouterr().out

    assert exit_code == 0 and json.loads(output) == {"firstName": "A"}


def test_cli_show_many_seeds_from_bundle(tmp_path: Path, capsys) -> None:
    root = _root(tmp_path)

    exit_code = main(
        ["--root", str(root), "--bundle-dir", str(bundle_root()), "show", "UsersArray", "--many"]
    )
    output = capsys.readouterr().out

    assert exit_code == 0 and len(json.loads(output)) == 2


def test_cli_exists_exit_code_tracks_presence(tmp_path: Path, capsys) -> None:
    """Exists command should exit zero only when the document is present."""
    root = _root(tmp_path)
    ObjectStore(StoreConfig(documents_root=root, default_directory_name="Docs")).save({}, "user")

    present = main(["--root", str(root), "--default-directory", "Docs", "exists", "user"])
    absent = main(["--root", str(root), "--default-directory", "Docs", "exists", "other"])

    assert present == 0 and absent == 1 and capsys.readouterr().out.split() == ["true", "false"]


def test_cli_delete_missing_document_reports_error(tmp_path: Path, capsys) -> None:
    root = _root(tmp_path)

    exit_code = main(["--root", str(root), "delete", "missing"])
    output = capsys.readouterr().out

    assert exit_code == 1 and output.startswith("error=")


def test_cli_seed_and_path_print_document_location(tmp_path: Path, capsys) -> None:
    """Seed should copy from the bundle and path should resolve the copy."""
    root = _root(tmp_path)
    arguments = ["--root", str(root), "--bundle-dir", str(bundle_root())]

    seed_code = main([*arguments, "seed", "User", "--directory", "T"])
    path_code = main([*arguments, "path", "User", "--directory", "T"])
    lines = capsys.readouterr().out.splitlines()

    assert seed_code == 0 and path_code == 0 and lines[0] == lines[1] and lines[0].endswith(
        "User.json"
    )


def test_cli_delete_directory_removes_folder(tmp_path: Path) -> None:
    root = _root(tmp_path)
    ObjectStore(StoreConfig(documents_root=root)).save({}, "user", "T")

    exit_code = main(["--root", str(root), "delete-directory", "--directory", "T"])

    assert exit_code == 0 and not (root / "T").exists()


def test_cli_missing_root_reports_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["--root", str(tmp_path / "missing"), "exists", "user"])

    assert exit_code == 1 and "error=" in capsys.readouterr().out
