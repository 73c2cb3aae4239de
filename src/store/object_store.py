"""JSON object store facade.

This module exposes save, load, exists, and delete operations for single
values and ordered collections. It composes path resolution, atomic file
IO, the JSON codec, and bundle seeding, and owns the mutable default
directory name.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
import threading
from typing import Any

from core.config import StoreConfig
from core.errors import (
    DecodeError,
    DirectoryNotFoundError,
    DocumentNotFoundError,
    ResourceNotFoundInBundleError,
)
from core.logging_config import get_logger
from core.names import validate_directory_name
from core.types import DirectoryArgument, as_directory_reference
from store import codec, file_io
from store.bundle import DirectoryBundle, ResourceBundle, read_resource
from store.bundle_seeder import BundleSeeder
from store.path_resolver import PathResolver, document_file_name

_LOGGER = get_logger(__name__)


class ObjectStore:
    """File-based JSON document store.

    Documents live at ``<root>/<directory>/<filename>.json``. Calls that
    omit a directory use the store's current default directory name.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        bundle: ResourceBundle | None = None,
    ) -> None:
        """Create a store.

        Args:
            config: Optional store configuration; read from the environment
                when omitted.
            bundle: Optional read-only bundle used for seeding. Defaults to
                a directory bundle at config.bundle_dir when configured.
        """
        self._config = config or StoreConfig.from_env()
        if bundle is None and self._config.bundle_dir is not None:
            bundle = DirectoryBundle(self._config.bundle_dir)
        self._resolver = PathResolver(self._config)
        self._seeder = BundleSeeder(bundle)
        self._default_directory_lock = threading.Lock()
        self._default_directory_name = self._config.initial_directory_name()

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def bundle(self) -> ResourceBundle | None:
        return self._seeder.bundle

    @property
    def default_directory_name(self) -> str:
        """Current default directory name."""
        with self._default_directory_lock:
            return self._default_directory_name

    def set_default_directory_name(self, name: str) -> None:
        """Replace the default directory used by later default-addressed calls.

        Raises:
            InvalidDirectoryNameError: If name is not a single path segment.
        """
        validate_directory_name(name)
        with self._default_directory_lock:
            previous = self._default_directory_name
            self._default_directory_name = name
        _LOGGER.info("default_directory_changed", previous=previous, current=name)

    def documents_root(self) -> Path:
        """Return the private documents root."""
        return self._resolver.documents_root()

    def directory_path(self, directory: DirectoryArgument = None) -> Path:
        """Resolve a directory argument to its absolute path."""
        return self._resolver.directory_path(
            as_directory_reference(directory),
            self.default_directory_name,
        )

    def save(self, value: object, filename: str, directory: DirectoryArgument = None) -> Path:
        """Save one value as a JSON document.

        Args:
            value: Value to encode.
            filename: Document filename without extension.
            directory: Target directory; the default directory when omitted.

        Returns:
            Absolute path of the written document.

        Raises:
            EncodeError: If value is not representable; nothing is written.
            DirectoryCreateFailedError: If the directory cannot be created.
            WriteError: If the document cannot be written.
        """
        return self._write(codec.encode(value), filename, directory)

    def save_many(
        self,
        values: Iterable[object],
        filename: str,
        directory: DirectoryArgument = None,
    ) -> Path:
        """Save an ordered sequence of values as one JSON array document."""
        return self._write(codec.encode_many(values), filename, directory)

    def load(
        self,
        filename: str,
        directory: DirectoryArgument = None,
        object_type: Any = None,
    ) -> Any:
        """Load one value, seeding it from the bundle on first access.

        Args:
            filename: Document filename without extension.
            directory: Source directory; the default directory when omitted.
            object_type: Optional target type for decoding.

        Returns:
            Decoded value.

        Raises:
            DocumentNotFoundError: If neither storage nor bundle has it.
            DecodeError: If the document does not match object_type.
        """
        document_path = self._seed_and_resolve(filename, directory)
        return _decode_document(document_path, object_type, many=False)

    def load_many(
        self,
        filename: str,
        directory: DirectoryArgument = None,
        object_type: Any = None,
    ) -> list[Any]:
        """Load an ordered sequence of values from a JSON array document."""
        document_path = self._seed_and_resolve(filename, directory)
        return _decode_document(document_path, object_type, many=True)

    def load_path(self, path: Path, object_type: Any = None) -> Any:
        """Load one value from an explicit document path, without seeding."""
        return _decode_document(Path(path).expanduser(), object_type, many=False)

    def load_many_path(self, path: Path, object_type: Any = None) -> list[Any]:
        """Load a value sequence from an explicit document path, without seeding."""
        return _decode_document(Path(path).expanduser(), object_type, many=True)

    def load_from_bundle(
        self,
        filename: str,
        bundle: ResourceBundle | None = None,
        object_type: Any = None,
    ) -> Any:
        """Decode one value straight from a bundle, leaving storage untouched."""
        data = read_resource(self._require_bundle(bundle), filename)
        return codec.decode(data, object_type)

    def load_many_from_bundle(
        self,
        filename: str,
        bundle: ResourceBundle | None = None,
        object_type: Any = None,
    ) -> list[Any]:
        """Decode a value sequence straight from a bundle."""
        data = read_resource(self._require_bundle(bundle), filename)
        return codec.decode_many(data, object_type)

    def exists(self, filename: str, directory: DirectoryArgument = None) -> bool:
        """Return whether a document exists in writable storage."""
        return file_io.exists(self._document_path(filename, directory))

    def document_path(self, filename: str, directory: DirectoryArgument = None) -> Path:
        """Return the path of an existing document.

        Raises:
            DocumentNotFoundError: If the document does not exist.
        """
        document_path = self._document_path(filename, directory)
        if not file_io.exists(document_path):
            raise DocumentNotFoundError(f"Document not found at {document_path}.")
        return document_path

    def delete(self, filename: str, directory: DirectoryArgument = None) -> None:
        """Delete one document.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            DeleteError: If deletion fails.
        """
        document_path = self._document_path(filename, directory)
        file_io.remove(document_path)
        _LOGGER.info("document_deleted", path=str(document_path))

    def delete_directory(self, directory: DirectoryArgument = None) -> None:
        """Recursively delete a document directory.

        Raises:
            DirectoryNotFoundError: If the directory does not exist or the
                path holds something other than a directory.
            DeleteError: If deletion fails.
        """
        directory_path = self.directory_path(directory)
        if file_io.exists(directory_path) and not directory_path.is_dir():
            raise DirectoryNotFoundError(
                f"Path {directory_path} is not a directory. Nothing to delete."
            )
        try:
            file_io.remove(directory_path)
        except DocumentNotFoundError as error:
            raise DirectoryNotFoundError(
                f"Directory {directory_path} does not exist. Nothing to delete."
            ) from error
        _LOGGER.info("directory_deleted", path=str(directory_path))

    def copy_from_bundle(
        self,
        filename: str,
        directory: DirectoryArgument = None,
        bundle: ResourceBundle | None = None,
    ) -> Path:
        """Copy a bundled document into storage, replacing any stored copy.

        Args:
            filename: Document filename without extension.
            directory: Target directory; the default directory when omitted.
            bundle: Source bundle; the configured bundle when omitted.

        Returns:
            Destination document path.

        Raises:
            ResourceNotFoundInBundleError: If the bundle lacks the document.
        """
        return self._seeder.copy_from_bundle(
            self._require_bundle(bundle),
            self.directory_path(directory),
            filename,
        )

    def _write(self, data: bytes, filename: str, directory: DirectoryArgument) -> Path:
        directory_path = self.directory_path(directory)
        document_path = directory_path / document_file_name(filename)
        file_io.ensure_directory(directory_path)
        file_io.write_atomic(document_path, data)
        _LOGGER.info("document_saved", path=str(document_path), size_bytes=len(data))
        return document_path

    def _document_path(self, filename: str, directory: DirectoryArgument) -> Path:
        return self.directory_path(directory) / document_file_name(filename)

    def _seed_and_resolve(self, filename: str, directory: DirectoryArgument) -> Path:
        directory_path = self.directory_path(directory)
        document_path = directory_path / document_file_name(filename)
        try:
            self._seeder.seed_if_missing(directory_path, filename)
        except ResourceNotFoundInBundleError as error:
            raise DocumentNotFoundError(
                f"Document not found at {document_path} or in the bundle. "
                "Save it or ship it with the bundle before loading."
            ) from error
        return document_path

    def _require_bundle(self, bundle: ResourceBundle | None) -> ResourceBundle:
        resolved = bundle or self._seeder.bundle
        if resolved is None:
            raise ResourceNotFoundInBundleError(
                "No bundle configured. Pass a bundle or set bundle_dir in StoreConfig."
            )
        return resolved


def _decode_document(document_path: Path, object_type: Any, many: bool) -> Any:
    """Read and decode a document, naming the path in decode failures."""
    data = file_io.read_all(document_path)
    try:
        if many:
            return codec.decode_many(data, object_type)
        return codec.decode(data, object_type)
    except DecodeError as error:
        raise DecodeError(f"Failed to decode document {document_path}: {error}") from error
