"""
Pytest configuration and fixtures for file_organizer tests.
"""

import os
from pathlib import Path
from typing import Callable, Dict

import pytest

# Sample directory contents: name -> file content
SAMPLE_FILES = {
    "a.jpg": b"jpeg bytes a",
    "b.JPG": b"jpeg bytes b",
    "notes.txt": b"some notes",
    "archive.tar.gz": b"gzip bytes",
    "README": b"read me",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep FILE_ORGANIZER_* variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("FILE_ORGANIZER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def messy_directory(tmp_path: Path) -> Path:
    """Create a directory with a mix of file types."""
    target = tmp_path / "messy"
    target.mkdir()

    for name, content in SAMPLE_FILES.items():
        (target / name).write_bytes(content)

    return target


@pytest.fixture
def snapshot_tree() -> Callable[[Path], Dict[str, bytes]]:
    """Return a function mapping every path under a root to its content."""

    def _snapshot(root: Path) -> Dict[str, bytes]:
        tree: Dict[str, bytes] = {}
        for path in sorted(root.rglob("*")):
            rel = path.relative_to(root).as_posix()
            tree[rel] = b"<dir>" if path.is_dir() else path.read_bytes()
        return tree

    return _snapshot
