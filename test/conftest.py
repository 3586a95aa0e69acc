"""
Pytest configuration and fixtures for Block Fields tests
"""

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from block_fields.blocks.store import BlockStore  # noqa: E402
from block_fields.config import settings  # noqa: E402
from block_fields.plugins.filters import filters  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(autouse=True)
def clean_filters():
    """Every test starts and ends with no filter callbacks registered."""
    filters.clear()
    yield
    filters.clear()


@pytest.fixture
def theme_dirs(tmp_path: Path, monkeypatch) -> dict[str, Path]:
    """
    Point the template search roots at empty temporary directories.

    Returns the directories keyed as "template", "stylesheet" and "compat".
    """
    dirs = {
        "template": tmp_path / "parent-theme",
        "stylesheet": tmp_path / "child-theme",
        "compat": tmp_path / "theme-compat",
    }
    for directory in dirs.values():
        (directory / "blocks").mkdir(parents=True)

    monkeypatch.setattr(settings, "template_directory", dirs["template"])
    monkeypatch.setattr(settings, "stylesheet_directory", dirs["stylesheet"])
    monkeypatch.setattr(settings, "compat_directory", dirs["compat"])
    return dirs


@pytest.fixture
def blocks_file(tmp_path: Path, monkeypatch) -> Path:
    """Isolated blocks file used by the store dependency."""
    path = tmp_path / "data" / "blocks.json"
    monkeypatch.setattr(settings, "blocks_file", path)
    return path


@pytest.fixture
def store(blocks_file: Path) -> BlockStore:
    return BlockStore(blocks_file)


@pytest.fixture
def client(blocks_file: Path, theme_dirs: dict[str, Path]) -> TestClient:
    """Test client with isolated block storage and theme directories."""
    return TestClient(app)


@pytest.fixture
def write_template():
    """Return a helper that writes a template file below a directory."""

    def _write(directory: Path, name: str, source: str) -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write
