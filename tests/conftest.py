"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from safe_fileops.config import FileOpsSettings
from safe_fileops.context import FileOpsContext, create_context


@pytest.fixture
def settings() -> FileOpsSettings:
    """Default settings with a small buffer to exercise chunking."""
    return FileOpsSettings(buffer_size=4)


@pytest.fixture
def context(settings: FileOpsSettings) -> FileOpsContext:
    """Context over the real filesystem."""
    return create_context(settings=settings)


# ============================================================================
# Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create src/a.txt (5 bytes) and src/sub/b.txt (3 bytes)."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.txt").write_bytes(b"hello")
    (src / "sub" / "b.txt").write_bytes(b"abc")
    return src


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """Create a tree with nested and empty directories."""
    root = tmp_path / "deep"
    (root / "one" / "two" / "three").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.bin").write_bytes(bytes(range(256)))
    (root / "one" / "1.txt").write_text("first level")
    (root / "one" / "two" / "2.txt").write_text("second level")
    (root / "one" / "two" / "three" / "3.txt").write_text("third")
    return root


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a file with a known old modification time."""
    path = tmp_path / "sample.txt"
    path.write_text("sample content for copying")
    old = 946684800_000_000_000  # 2000-01-01T00:00:00Z
    os.utime(path, ns=(old, old))
    return path


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.lexists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.is_symlink.return_value = False
    fs.list_dir.return_value = []
    fs.resolve.side_effect = lambda p: Path("/canonical") / p
    return fs

