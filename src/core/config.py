"""Runtime configuration model for CodableFiles.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    APP_NAME_ENV_VAR,
    BUNDLE_DIR_ENV_VAR,
    DEFAULT_APP_NAME,
    DEFAULT_DIRECTORY_ENV_VAR,
    FALLBACK_DIRECTORY_NAME,
    ROOT_ENV_VAR,
)
from core.errors import InvalidDirectoryNameError, StoreConfigError
from core.names import is_single_segment, validate_directory_name


@dataclass(frozen=True)
class StoreConfig:
    """Validated construction-time store configuration.

    Attributes:
        documents_root: Explicit private documents root; the platform
            per-user data directory for app_name is used when None.
        app_name: Application identifier used to locate the platform root
            and to derive the initial default directory name.
        default_directory_name: Initial default directory override.
        bundle_dir: Optional read-only directory of bundled documents.
    """

    documents_root: Path | None = None
    app_name: str = DEFAULT_APP_NAME
    default_directory_name: str | None = None
    bundle_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StoreConfigError: If environment values are invalid.
        """
        root_value = _read_env(ROOT_ENV_VAR)
        bundle_value = _read_env(BUNDLE_DIR_ENV_VAR)
        default_directory = _read_env(DEFAULT_DIRECTORY_ENV_VAR)
        if default_directory is not None:
            _parse_directory_name(DEFAULT_DIRECTORY_ENV_VAR, default_directory)
        return cls(
            documents_root=_to_path(root_value),
            app_name=_read_env(APP_NAME_ENV_VAR) or DEFAULT_APP_NAME,
            default_directory_name=default_directory,
            bundle_dir=_to_path(bundle_value),
        )

    def initial_directory_name(self) -> str:
        """Return the default directory name a new store starts with.

        The explicit override wins; otherwise the application name is used
        when it is a valid folder name, else the fallback constant.
        """
        if self.default_directory_name is not None:
            return validate_directory_name(self.default_directory_name)
        if is_single_segment(self.app_name):
            return self.app_name
        return FALLBACK_DIRECTORY_NAME


def _read_env(name: str) -> str | None:
    """Read one environment variable, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _to_path(raw_value: str | None) -> Path | None:
    if raw_value is None:
        return None
    return Path(raw_value).expanduser().resolve()


def _parse_directory_name(variable: str, raw_value: str) -> str:
    """Validate a directory name read from the environment.

    Raises:
        StoreConfigError: If value is not a single path segment.
    """
    try:
        return validate_directory_name(raw_value)
    except InvalidDirectoryNameError as error:
        raise StoreConfigError(
            f"Invalid {variable} value: expected a single folder name, got '{raw_value}'. "
            f"Set {variable} to a name without separators or '..'."
        ) from error
