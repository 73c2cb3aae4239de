"""Copy-on-first-read seeding from a read-only bundle.

This module copies bundled documents into writable storage. Check and
copy run under one lock per (directory, filename) key, so concurrent
first loads of the same document seed it at most once. A key's lock is
dropped once no caller holds or waits on it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from importlib import resources
from pathlib import Path
import threading

from core.logging_config import get_logger
from store import file_io
from store.bundle import ResourceBundle, require_resource
from store.path_resolver import document_file_name

_LOGGER = get_logger(__name__)


class BundleSeeder:
    """Seed writable storage from an optional default bundle."""

    def __init__(self, bundle: ResourceBundle | None) -> None:
        self._bundle = bundle
        self._key_locks: dict[tuple[str, str], _KeyLock] = {}
        self._key_locks_guard = threading.Lock()

    @property
    def bundle(self) -> ResourceBundle | None:
        return self._bundle

    def seed_if_missing(self, directory_path: Path, filename: str) -> bool:
        """Copy a bundled document in when writable storage lacks it.

        Args:
            directory_path: Resolved writable directory.
            filename: Document filename without extension.

        Returns:
            True when the document was copied from the bundle.

        Raises:
            ResourceNotFoundInBundleError: If neither storage nor bundle has it.
            DirectoryCreateFailedError: If the directory cannot be created.
            CopyError: If the copy fails.
        """
        if self._bundle is None:
            return False
        document_path = directory_path / document_file_name(filename)
        with self._locked(directory_path, filename):
            if file_io.exists(document_path):
                return False
            self._copy_in(self._bundle, directory_path, filename)
        _LOGGER.info(
            "document_seeded",
            path=str(document_path),
            bundle=repr(self._bundle),
        )
        return True

    def copy_from_bundle(
        self,
        bundle: ResourceBundle,
        directory_path: Path,
        filename: str,
    ) -> Path:
        """Copy a bundled document in, replacing any stored copy.

        Returns:
            Destination document path.
        """
        with self._locked(directory_path, filename):
            destination = self._copy_in(bundle, directory_path, filename)
        _LOGGER.info("document_copied_from_bundle", path=str(destination), bundle=repr(bundle))
        return destination

    def _copy_in(self, bundle: ResourceBundle, directory_path: Path, filename: str) -> Path:
        resource = require_resource(bundle, filename)
        file_io.ensure_directory(directory_path)
        destination = directory_path / document_file_name(filename)
        with resources.as_file(resource) as source_path:
            file_io.copy(Path(source_path), destination)
        return destination

    @contextmanager
    def _locked(self, directory_path: Path, filename: str) -> Iterator[None]:
        key = (str(directory_path), filename)
        with self._key_locks_guard:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = _KeyLock()
                self._key_locks[key] = entry
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._key_locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._key_locks[key]


class _KeyLock:
    """Lock shared by the callers currently working on one key."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0
