"""Tests for shared data types and errors."""

from __future__ import annotations

from pathlib import Path

import pytest

from safe_fileops.errors import (
    FileOpsError,
    InvalidArgumentError,
    IOFailureError,
    SelfOverlapError,
    SizeOverflowError,
)
from safe_fileops.types import (
    CopyOperation,
    CopyResult,
    DeleteOperation,
    DeleteResult,
    TreeCopyResult,
)


class TestCopyResult:
    """Tests for CopyResult invariants."""

    def test_negative_bytes_rejected(self) -> None:
        """Test a negative byte count is invalid."""
        with pytest.raises(ValueError, match="negative"):
            CopyResult(operation=CopyOperation(Path("a"), Path("b")), bytes_copied=-1)

    def test_operation_is_frozen(self) -> None:
        """Test operations cannot be mutated after construction."""
        operation = CopyOperation(Path("a"), Path("b"))
        with pytest.raises(AttributeError):
            operation.source = Path("c")  # type: ignore[misc]


class TestTreeCopyResult:
    """Tests for TreeCopyResult aggregation."""

    def test_add_file(self) -> None:
        """Test file results are folded into the totals."""
        tree = TreeCopyResult(source=Path("s"), destination=Path("d"))
        op = CopyOperation(Path("s/a"), Path("d/a"))

        tree.add_file(CopyResult(operation=op, bytes_copied=5))
        tree.add_file(CopyResult(operation=op, bytes_copied=3, warnings=["w"]))

        assert tree.files_copied == 2
        assert tree.bytes_copied == 8
        assert tree.warnings == ["w"]


class TestDeleteResult:
    """Tests for DeleteResult invariants."""

    def test_missing_target_cannot_have_deletions(self) -> None:
        """Test existed=False excludes deletion counts."""
        with pytest.raises(ValueError, match="existed=False"):
            DeleteResult(operation=DeleteOperation(Path("x")), existed=False, files_deleted=1)


class TestErrors:
    """Tests for the error taxonomy."""

    def test_invalid_argument_is_value_error(self) -> None:
        """Test InvalidArgumentError is a ValueError."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, FileOpsError)

    def test_io_failure_is_os_error(self) -> None:
        """Test IOFailureError is an OSError."""
        assert issubclass(IOFailureError, OSError)
        assert issubclass(IOFailureError, FileOpsError)

    def test_self_overlap_is_both(self) -> None:
        """Test SelfOverlapError can be caught as either family."""
        error = SelfOverlapError("same file", path=Path("/x"), operation="copy_file")
        assert isinstance(error, InvalidArgumentError)
        assert isinstance(error, IOFailureError)

    def test_overflow_is_overflow_error(self) -> None:
        """Test SizeOverflowError is an OverflowError."""
        assert issubclass(SizeOverflowError, OverflowError)

    def test_message_format(self) -> None:
        """Test the message names the operation and the path."""
        error = IOFailureError("unable to delete file", path=Path("/tmp/x"), operation="force_delete")
        assert str(error) == "force_delete: unable to delete file (/tmp/x)"
        assert error.path == Path("/tmp/x")
        assert error.operation == "force_delete"

    def test_message_without_context(self) -> None:
        """Test a bare message is left alone."""
        assert str(InvalidArgumentError("bad")) == "bad"
