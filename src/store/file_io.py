"""Filesystem primitives for document storage.

This module isolates existence checks, atomic writes, reads, copies,
and deletions over fully resolved paths. Every OS failure is translated
into a typed store error.
"""

from __future__ import annotations

import os
from pathlib import Path
import shutil
import tempfile

from core.constants import TEMP_FILE_SUFFIX
from core.errors import (
    CopyError,
    DeleteError,
    DirectoryCreateFailedError,
    DocumentNotFoundError,
    ReadError,
    SourceNotFoundError,
    WriteError,
)
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def exists(path: Path) -> bool:
    """Return whether a file or directory exists at path.

    Never raises. Unreadable paths are reported as absent and logged.
    """
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as error:
        _LOGGER.warning("path_unreadable", path=str(path), error=str(error))
        return False
    return True


def ensure_directory(path: Path) -> None:
    """Create one directory level if absent.

    Args:
        path: Directory to create; its parent must already exist.

    Raises:
        DirectoryCreateFailedError: If the directory cannot be created.
    """
    if path.is_dir():
        return
    try:
        path.mkdir(parents=False, exist_ok=True)
    except FileExistsError as error:
        raise DirectoryCreateFailedError(
            f"Cannot create directory {path}: a file with that name already exists. "
            "Remove the file or choose another directory name."
        ) from error
    except OSError as error:
        raise DirectoryCreateFailedError(
            f"Failed to create directory {path}: {error}. "
            "Check that the documents root exists and is writable."
        ) from error


def write_atomic(path: Path, data: bytes) -> None:
    """Write a complete document so readers never see partial content.

    Args:
        path: Final document path.
        data: Complete document bytes.

    Raises:
        WriteError: If the document cannot be written.
    """
    temp_path: Path | None = None
    try:
        file_descriptor, temp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=TEMP_FILE_SUFFIX,
        )
        temp_path = Path(temp_name)
        with os.fdopen(file_descriptor, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
    except OSError as error:
        _discard_temp_file(temp_path)
        raise WriteError(f"Failed to write document {path}: {error}.") from error


def read_all(path: Path) -> bytes:
    """Read all bytes of a document.

    Raises:
        DocumentNotFoundError: If no file exists at path.
        ReadError: For any other I/O failure.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError as error:
        raise DocumentNotFoundError(
            f"Document not found at {path}. Save it before loading."
        ) from error
    except OSError as error:
        raise ReadError(f"Failed to read document {path}: {error}.") from error


def remove(path: Path) -> None:
    """Delete a file or an entire directory subtree.

    Raises:
        DocumentNotFoundError: If nothing exists at path.
        DeleteError: If deletion fails.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError as error:
        raise DocumentNotFoundError(f"Nothing to delete at {path}.") from error
    except OSError as error:
        raise DeleteError(f"Failed to delete {path}: {error}.") from error


def copy(source: Path, destination: Path) -> None:
    """Copy a file, replacing any existing destination.

    The copy lands in a sibling temp file first and is then swapped into
    place, so the destination mirrors the source exactly afterwards.

    Raises:
        SourceNotFoundError: If source is not an existing file.
        CopyError: If the copy fails.
    """
    if not source.is_file():
        raise SourceNotFoundError(f"Copy source {source} does not exist.")
    temp_path: Path | None = None
    try:
        file_descriptor, temp_name = tempfile.mkstemp(
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=TEMP_FILE_SUFFIX,
        )
        os.close(file_descriptor)
        temp_path = Path(temp_name)
        shutil.copyfile(source, temp_path)
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        os.replace(temp_path, destination)
    except OSError as error:
        _discard_temp_file(temp_path)
        raise CopyError(f"Failed to copy {source} to {destination}: {error}.") from error


def _discard_temp_file(temp_path: Path | None) -> None:
    if temp_path is None:
        return
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as error:
        _LOGGER.warning("temp_file_cleanup_failed", path=str(temp_path), error=str(error))
