"""Shared typed models.

This module defines the directory addressing model used by the path
resolver, the bundle seeder and the object store facade.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryReference:
    """Logical reference to a document directory.

    Attributes:
        name: Explicit subdirectory name, or None for the store's
            current default directory.
    """

    name: str | None = None

    @classmethod
    def named(cls, name: str) -> "DirectoryReference":
        """Build a reference to an explicitly named directory."""
        return cls(name=name)

    @property
    def is_default(self) -> bool:
        """Return whether this reference resolves to the default directory."""
        return self.name is None


DEFAULT_DIRECTORY = DirectoryReference()

DirectoryArgument = str | DirectoryReference | None


def as_directory_reference(directory: DirectoryArgument) -> DirectoryReference:
    """Normalize a facade directory argument into a reference.

    Args:
        directory: Directory name, reference, or None for the default.

    Returns:
        Directory reference.
    """
    if directory is None:
        return DEFAULT_DIRECTORY
    if isinstance(directory, DirectoryReference):
        return directory
    return DirectoryReference.named(directory)
