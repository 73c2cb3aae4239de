"""Public SDK surface for CodableFiles.

This module provides a stable import path for library users.
It re-exports the object store, its configuration, and error types.
"""

from __future__ import annotations

from core.config import StoreConfig
from core.errors import (
    CodableFilesError,
    CopyError,
    DecodeError,
    DeleteError,
    DirectoryCreateFailedError,
    DirectoryNotFoundError,
    DocumentNotFoundError,
    EncodeError,
    InvalidDirectoryNameError,
    InvalidFilenameError,
    ReadError,
    ResourceNotFoundInBundleError,
    RootUnavailableError,
    SourceNotFoundError,
    StoreConfigError,
    WriteError,
)
from core.types import DEFAULT_DIRECTORY, DirectoryReference
from store.bundle import DirectoryBundle, PackageBundle, ResourceBundle
from store.object_store import ObjectStore

__all__ = [
    "CodableFilesError",
    "CopyError",
    "DEFAULT_DIRECTORY",
    "DecodeError",
    "DeleteError",
    "DirectoryBundle",
    "DirectoryCreateFailedError",
    "DirectoryNotFoundError",
    "DirectoryReference",
    "DocumentNotFoundError",
    "EncodeError",
    "InvalidDirectoryNameError",
    "InvalidFilenameError",
    "ObjectStore",
    "PackageBundle",
    "ReadError",
    "ResourceBundle",
    "ResourceNotFoundInBundleError",
    "RootUnavailableError",
    "SourceNotFoundError",
    "StoreConfig",
    "StoreConfigError",
    "WriteError",
]
