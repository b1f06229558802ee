"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from promptree.utils.config import FORMAT_FIELDS
from promptree.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_promptree_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/promptree directory with no env overrides."""
    promptree_dir = temp_dir / ".promptree"
    promptree_dir.mkdir()
    monkeypatch.setenv("PROMPTREE_DIR", str(promptree_dir))
    monkeypatch.delenv("PROMPTREE_DEBUG", raising=False)
    monkeypatch.delenv("PROMPTREE_LICENSE_YEAR", raising=False)
    for field in FORMAT_FIELDS:
        monkeypatch.delenv(f"PROMPTREE_{field.upper()}", raising=False)
    reload_config()
    yield promptree_dir
    reload_config()
