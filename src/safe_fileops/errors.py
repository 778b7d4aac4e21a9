"""Error taxonomy for file operations.

Two families cover every failure:

- InvalidArgumentError: the caller passed a missing path or a path of the wrong
  kind. Raised before any filesystem side effect.
- IOFailureError: the filesystem refused an operation, or a post-condition
  check failed. Side effects may already have happened.

Both carry the offending path and the operation name so callers can report
precisely.
"""

from __future__ import annotations

from os import PathLike

__all__ = [
    "FileOpsError",
    "InvalidArgumentError",
    "IOFailureError",
    "SelfOverlapError",
    "SizeOverflowError",
]


class FileOpsError(Exception):
    """Base error for file operations."""

    def __init__(
        self,
        message: str,
        path: str | PathLike[str] | None = None,
        operation: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human readable description.
            path: Path the operation failed on.
            operation: Name of the failing operation.
        """
        self.message = message
        self.path = path
        self.operation = operation
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.operation:
            parts.append(f"{self.operation}:")
        parts.append(self.message)
        if self.path is not None:
            parts.append(f"({self.path})")
        return " ".join(parts)

    def __str__(self) -> str:
        return self._format()


class InvalidArgumentError(FileOpsError, ValueError):
    """Missing argument or path of the wrong kind."""

    pass


class IOFailureError(FileOpsError, OSError):
    """Filesystem failure or failed post-condition."""

    pass


class SelfOverlapError(InvalidArgumentError, IOFailureError):
    """Destination equals or is nested inside the source."""

    pass


class SizeOverflowError(FileOpsError, OverflowError):
    """Accumulated size exceeds the unsigned 64-bit range."""

    pass
