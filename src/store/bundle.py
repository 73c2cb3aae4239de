"""Read-only document bundles.

A bundle resolves ``(name, extension)`` to a readable resource. The store
only ever reads from bundles; seeding copies their documents into
writable storage.
"""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Protocol

from core.constants import DOCUMENT_EXTENSION
from core.errors import ReadError, ResourceNotFoundInBundleError
from core.names import validate_filename


class ResourceBundle(Protocol):
    """Named-resource lookup supplied by the host application."""

    def locate(self, name: str, extension: str = DOCUMENT_EXTENSION) -> Traversable | None:
        """Return the resource for name and extension, or None if absent."""


class DirectoryBundle:
    """Bundle backed by a plain read-only directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def locate(self, name: str, extension: str = DOCUMENT_EXTENSION) -> Traversable | None:
        resource_path = self._root / f"{validate_filename(name)}.{extension}"
        return resource_path if resource_path.is_file() else None

    def __repr__(self) -> str:
        return f"DirectoryBundle({str(self._root)!r})"


class PackageBundle:
    """Bundle backed by package data shipped inside an importable package.

    Args:
        package: Dotted package name holding the resources.
        subdirectory: Optional folder inside the package.
    """

    def __init__(self, package: str, subdirectory: str | None = None) -> None:
        self._package = package
        self._subdirectory = subdirectory

    def locate(self, name: str, extension: str = DOCUMENT_EXTENSION) -> Traversable | None:
        try:
            base = resources.files(self._package)
        except ModuleNotFoundError as error:
            raise ResourceNotFoundInBundleError(
                f"Bundle package '{self._package}' cannot be imported: {error}."
            ) from error
        if self._subdirectory:
            base = base / self._subdirectory
        resource = base / f"{validate_filename(name)}.{extension}"
        return resource if resource.is_file() else None

    def __repr__(self) -> str:
        return f"PackageBundle({self._package!r}, {self._subdirectory!r})"


def require_resource(bundle: ResourceBundle, name: str) -> Traversable:
    """Locate a document in a bundle or fail.

    Raises:
        ResourceNotFoundInBundleError: If the bundle has no such document.
    """
    resource = bundle.locate(name, DOCUMENT_EXTENSION)
    if resource is None:
        raise ResourceNotFoundInBundleError(
            f"Document '{name}.{DOCUMENT_EXTENSION}' not found in {bundle!r}. "
            "Ship the file with the bundle or save it before loading."
        )
    return resource


def read_resource(bundle: ResourceBundle, name: str) -> bytes:
    """Read all bytes of a bundled document.

    Raises:
        ResourceNotFoundInBundleError: If the bundle has no such document.
        ReadError: If the resource cannot be read.
    """
    resource = require_resource(bundle, name)
    try:
        return resource.read_bytes()
    except OSError as error:
        raise ReadError(f"Failed to read bundled document '{name}': {error}.") from error
