"""Core constants used across CodableFiles modules.

This module centralizes file-layout and configuration literals.
Keeping values here avoids magic literals in store logic.
"""

from __future__ import annotations

DOCUMENT_EXTENSION = "json"
DEFAULT_APP_NAME = "CodableFiles"
FALLBACK_DIRECTORY_NAME = "MyAppDirectory"
TEMP_FILE_SUFFIX = ".tmp"
JSON_INDENT = 2
ROOT_ENV_VAR = "CODABLE_FILES_ROOT"
APP_NAME_ENV_VAR = "CODABLE_FILES_APP_NAME"
DEFAULT_DIRECTORY_ENV_VAR = "CODABLE_FILES_DEFAULT_DIRECTORY"
BUNDLE_DIR_ENV_VAR = "CODABLE_FILES_BUNDLE_DIR"
