"""Tests for validation module."""

from __future__ import annotations

from pathlib import Path

import pytest

from safe_fileops.errors import InvalidArgumentError
from safe_fileops.validation import require_path


class TestRequirePath:
    """Tests for require_path."""

    def test_path_passes_through(self) -> None:
        """Test a Path is returned as is."""
        path = Path("a/b")
        assert require_path(path, "source", "op") is path

    def test_string_converted(self) -> None:
        """Test a string becomes a Path."""
        assert require_path("a/b", "source", "op") == Path("a/b")

    def test_none_rejected(self) -> None:
        """Test None names the argument and operation."""
        with pytest.raises(InvalidArgumentError, match="copy_directory: source must not be None"):
            require_path(None, "source", "copy_directory")

    def test_wrong_type_rejected(self) -> None:
        """Test non path-like values are rejected."""
        with pytest.raises(InvalidArgumentError, match="must be a path, got int"):
            require_path(42, "source", "op")  # type: ignore[arg-type]

    def test_bytes_path_like_rejected(self) -> None:
        """Test a PathLike yielding bytes is rejected as an invalid argument."""

        class BytesPath:
            def __fspath__(self) -> bytes:
                return b"raw"

        with pytest.raises(InvalidArgumentError, match="not a usable path"):
            require_path(BytesPath(), "path", "op")  # type: ignore[arg-type]
