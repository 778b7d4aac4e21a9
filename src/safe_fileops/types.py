"""Shared data types for file operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

__all__ = [
    "CopyOperation",
    "CopyResult",
    "DeleteOperation",
    "DeleteResult",
    "OverflowPolicy",
    "PathKind",
    "SymlinkPolicy",
    "TreeCopyResult",
    "UINT64_MAX",
]

UINT64_MAX = 2**64 - 1


class PathKind(str, Enum):
    """What a path denotes at the moment it is queried."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"


class SymlinkPolicy(str, Enum):
    """How tree traversal treats symbolic links."""

    FOLLOW = "follow"
    SKIP = "skip"
    REJECT = "reject"


class OverflowPolicy(str, Enum):
    """What size accumulation does past UINT64_MAX."""

    ERROR = "error"
    SATURATE = "saturate"


@dataclass(frozen=True)
class CopyOperation:
    """A single file copy request.

    Attributes:
        source: File to read.
        destination: File to write.
        preserve_timestamp: Copy the source modification time onto the destination.
    """

    source: Path
    destination: Path
    preserve_timestamp: bool = True


@dataclass(frozen=True)
class DeleteOperation:
    """A delete request for a file or directory tree."""

    target: Path


@dataclass
class CopyResult:
    """Result of a single file copy.

    Primary failures are raised, never stored here. ``warnings`` holds the
    advisory failures of best-effort steps such as timestamp preservation.

    Attributes:
        operation: The copy that was performed.
        bytes_copied: Bytes written to the destination.
        warnings: Advisory failure messages.
    """

    operation: CopyOperation
    bytes_copied: int
    warnings: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.bytes_copied < 0:
            raise ValueError("bytes_copied cannot be negative")

    @property
    def timestamp_preserved(self) -> bool:
        """True if a requested timestamp update went through."""
        return self.operation.preserve_timestamp and not self.warnings


@dataclass
class TreeCopyResult:
    """Aggregated result of a recursive directory copy."""

    source: Path
    destination: Path
    files_copied: int = 0
    directories_created: int = 0
    bytes_copied: int = 0
    warnings: list[str] = field(default_factory=list)

    def add_file(self, result: CopyResult) -> None:
        """Fold a single file result into the totals."""
        self.files_copied += 1
        self.bytes_copied += result.bytes_copied
        self.warnings.extend(result.warnings)


@dataclass
class DeleteResult:
    """Result of a delete.

    Attributes:
        operation: The delete that was performed.
        existed: False if the target was already absent.
        files_deleted: Files and links removed.
        directories_deleted: Directories removed, the target included.
    """

    operation: DeleteOperation
    existed: bool
    files_deleted: int = 0
    directories_deleted: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.existed and (self.files_deleted or self.directories_deleted):
            raise ValueError("existed=False but entries were deleted")
