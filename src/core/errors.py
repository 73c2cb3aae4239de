"""CodableFiles exception hierarchy.

This module defines traceable store errors with clear boundaries.
Each failure kind has its own type so callers can handle it explicitly.
"""

from __future__ import annotations


class CodableFilesError(Exception):
    """Base exception for all CodableFiles failures."""


class StoreConfigError(CodableFilesError):
    """Raised for invalid store configuration."""


class RootUnavailableError(CodableFilesError):
    """Raised when the private documents root cannot be located."""


class InvalidDirectoryNameError(CodableFilesError):
    """Raised when a directory name is not a single path segment."""


class InvalidFilenameError(CodableFilesError):
    """Raised when a document filename is not a single path segment."""


class DirectoryNotFoundError(CodableFilesError):
    """Raised when a directory to delete does not exist."""


class DirectoryCreateFailedError(CodableFilesError):
    """Raised when a document directory cannot be created."""


class DocumentNotFoundError(CodableFilesError):
    """Raised when a document is absent from writable storage."""


class SourceNotFoundError(CodableFilesError):
    """Raised when a copy source file does not exist."""


class ResourceNotFoundInBundleError(CodableFilesError):
    """Raised when a document is absent from the read-only bundle."""


class EncodeError(CodableFilesError):
    """Raised when a value cannot be represented as JSON."""


class DecodeError(CodableFilesError):
    """Raised when document bytes do not match the expected shape."""


class WriteError(CodableFilesError):
    """Raised for I/O failures while writing a document."""


class ReadError(CodableFilesError):
    """Raised for I/O failures while reading a document."""


class CopyError(CodableFilesError):
    """Raised for I/O failures while copying a document."""


class DeleteError(CodableFilesError):
    """Raised for I/O failures while deleting a document or directory."""
