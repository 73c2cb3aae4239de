"""Unit tests for copy-on-first-read bundle seeding."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import DirectoryCreateFailedError, ResourceNotFoundInBundleError
from store.bundle import DirectoryBundle
from store.bundle_seeder import BundleSeeder
from tests.fixture_paths import bundle_root


def test_seed_copies_missing_document(tmp_path: Path) -> None:
    """A missing document should be copied in and the directory created."""
    seeder = BundleSeeder(DirectoryBundle(bundle_root()))
    directory = tmp_path / "Defaults"

    copied = seeder.seed_if_missing(directory, "User")

    assert copied and (directory / "User.json").read_bytes() == (
        bundle_root() / "User.json"
    ).read_bytes()


def test_seed_never_overwrites_existing_document(tmp_path: Path) -> None:
    seeder = BundleSeeder(DirectoryBundle(bundle_root()))
    directory = tmp_path / "Defaults"
    directory.mkdir()
    (directory / "User.json").write_text('{"firstName": "Local", "lastName": "Copy"}', encoding="utf-8")

    copied = seeder.seed_if_missing(directory, "User")

    assert not copied and "Local" in (directory / "User.json").read_text(encoding="utf-8")


def test_seed_without_bundle_is_noop(tmp_path: Path) -> None:
    seeder = BundleSeeder(None)

    assert seeder.seed_if_missing(tmp_path / "Defaults", "User") is False


def test_seed_missing_everywhere_raises(tmp_path: Path) -> None:
    """Absent in both storage and bundle should raise and create nothing."""
    seeder = BundleSeeder(DirectoryBundle(bundle_root()))

    with pytest.raises(ResourceNotFoundInBundleError):
        seeder.seed_if_missing(tmp_path / "Defaults", "Missing")

    assert not (tmp_path / "Defaults").exists()


def test_seed_does_not_create_nested_directories(tmp_path: Path) -> None:
    seeder = BundleSeeder(DirectoryBundle(bundle_root()))

    with pytest.raises(DirectoryCreateFailedError):
        seeder.seed_if_missing(tmp_path / "missing-root" / "Defaults", "User")


def test_copy_from_bundle_replaces_stored_copy(tmp_path: Path) -> None:
    """Explicit copies should replace an existing stored document."""
    seeder = BundleSeeder(None)
    directory = tmp_path / "Defaults"
    directory.mkdir()
    (directory / "User.json").write_text("{}", encoding="utf-8")

    destination = seeder.copy_from_bundle(DirectoryBundle(bundle_root()), directory, "User")

    assert destination.read_bytes() == (bundle_root() / "User.json").read_bytes()
