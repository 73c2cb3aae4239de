"""Documents root and document path resolution.

This module maps directory references and filenames onto absolute paths
under the private documents root. Apart from locating the root it has
no filesystem side effects.
"""

from __future__ import annotations

from pathlib import Path

import platformdirs

from core.config import StoreConfig
from core.constants import DOCUMENT_EXTENSION
from core.errors import RootUnavailableError
from core.names import validate_directory_name, validate_filename
from core.types import DirectoryReference


class PathResolver:
    """Resolve directory references under the private documents root."""

    def __init__(self, config: StoreConfig) -> None:
        self._config = config

    def documents_root(self) -> Path:
        """Return the private documents root.

        Returns:
            Absolute root directory path.

        Raises:
            RootUnavailableError: If the root cannot be located.
        """
        if self._config.documents_root is not None:
            root = self._config.documents_root.expanduser()
            if not root.is_dir():
                raise RootUnavailableError(
                    f"Documents root {root} does not exist or is not a directory. "
                    "Create it or point documents_root at an existing folder."
                )
            return root.resolve()
        try:
            return platformdirs.user_data_path(
                self._config.app_name,
                appauthor=False,
                ensure_exists=True,
            )
        except OSError as error:
            raise RootUnavailableError(
                f"Failed to locate the per-user data directory for "
                f"'{self._config.app_name}': {error}. "
                "Set documents_root explicitly."
            ) from error

    def directory_path(self, reference: DirectoryReference, default_name: str) -> Path:
        """Resolve a directory reference to an absolute path.

        Args:
            reference: Default or named directory reference.
            default_name: Current default directory name of the store.

        Returns:
            Absolute directory path one level below the root.
        """
        name = default_name if reference.is_default else str(reference.name)
        return self.documents_root() / validate_directory_name(name)

    def document_path(
        self,
        reference: DirectoryReference,
        filename: str,
        default_name: str,
    ) -> Path:
        """Resolve a document address to its absolute file path."""
        directory = self.directory_path(reference, default_name)
        return directory / document_file_name(filename)


def document_file_name(filename: str) -> str:
    """Return the on-disk file name for a document filename."""
    return f"{validate_filename(filename)}.{DOCUMENT_EXTENSION}"
