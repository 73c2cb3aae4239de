"""Path segment validation for directory names and filenames."""

from __future__ import annotations

from core.errors import InvalidDirectoryNameError, InvalidFilenameError

_FORBIDDEN_SEGMENTS = ("", ".", "..")
_FORBIDDEN_CHARACTERS = ("/", "\\", "\x00")


def is_single_segment(name: str) -> bool:
    """Return whether name is one non-empty, non-traversing path segment."""
    if name in _FORBIDDEN_SEGMENTS:
        return False
    return not any(character in name for character in _FORBIDDEN_CHARACTERS)


def validate_directory_name(name: str) -> str:
    """Validate a directory name.

    Args:
        name: Directory name relative to the documents root.

    Returns:
        The unchanged name.

    Raises:
        InvalidDirectoryNameError: If name is empty, absolute, or traversing.
    """
    if not isinstance(name, str) or not is_single_segment(name):
        raise InvalidDirectoryNameError(
            f"Invalid directory name {name!r}: expected a single path segment "
            "without separators or '..'. Use a plain folder name."
        )
    return name


def validate_filename(filename: str) -> str:
    """Validate a document filename given without extension.

    Raises:
        InvalidFilenameError: If filename is empty, absolute, or traversing.
    """
    if not isinstance(filename, str) or not is_single_segment(filename):
        raise InvalidFilenameError(
            f"Invalid document filename {filename!r}: expected a single path segment "
            "without separators or '..'. Pass the bare name without extension."
        )
    return filename
