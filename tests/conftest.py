"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def store_config(tmp_path: Path):
    """Store config rooted at an isolated temporary documents root."""
    from core.config import StoreConfig

    documents_root = tmp_path / "Documents"
    documents_root.mkdir()
    return StoreConfig(documents_root=documents_root, app_name="CodableFilesTests")
