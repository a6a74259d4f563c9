"""Shared fixtures for xdg-layout tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest


def _write_file(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def write_file():
    """Write a file, creating parent directories."""
    return _write_file


@pytest.fixture
def tree():
    """Create home plus three search directories A, B, C."""
    with TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        dirs = {name: root / name for name in ("home", "A", "B", "C")}
        for path in dirs.values():
            path.mkdir()
        yield dirs
