"""BDD test configuration for json-merger."""

from pathlib import Path

import pytest


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Input directory for a merge scenario."""
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory for a merge scenario; created by the merge itself."""
    return tmp_path / "output"
