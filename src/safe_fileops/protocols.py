"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the filesystem
primitives and for the services built on them. Designing to interfaces enables:
- Loose coupling between components
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from safe_fileops.types import CopyResult, DeleteResult, TreeCopyResult


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for primitive filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Implementations are thin and assumed reliable; every safety check
    lives in the services that consume them.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists, following symlinks.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def lexists(self, path: Path) -> bool:
        """Check if a path exists without following a final symlink.

        Args:
            path: Path to check.

        Returns:
            True if path or a (possibly dangling) link exists.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory (following symlinks)."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file (following symlinks)."""
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def stat(self, path: Path) -> os.stat_result:
        """Get status of a path, following symlinks.

        Raises:
            OSError: If the path cannot be queried.
        """
        ...

    def list_dir(self, path: Path) -> list[Path]:
        """List immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Child paths, sorted by name.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def open_binary(self, path: Path, mode: str) -> BinaryIO:
        """Open a file in binary mode.

        Args:
            path: File to open.
            mode: "rb" or "wb".

        Returns:
            Open binary file object, usable as a context manager.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file or symbolic link."""
        ...

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        ...

    def set_times(self, path: Path, atime_ns: int, mtime_ns: int) -> None:
        """Set access and modification times in nanoseconds.

        Raises:
            OSError: If the platform rejects the update.
        """
        ...

    def resolve(self, path: Path) -> Path:
        """Resolve symlinks and relative segments into an absolute path.

        Raises:
            OSError: If resolution fails.
            RuntimeError: On a symlink loop (older interpreters).
        """
        ...


@runtime_checkable
class FileCopier(Protocol):
    """Protocol for single file copies."""

    def copy_file(
        self, source: Path, destination: Path, preserve_timestamp: bool | None = None
    ) -> CopyResult:
        """Copy one file's bytes and optionally its modification time.

        Args:
            source: Existing regular file.
            destination: Target file path.
            preserve_timestamp: Override the configured default.

        Returns:
            CopyResult with bytes copied and advisory warnings.
        """
        ...

    def copy_file_to_directory(
        self, source: Path, directory: Path, preserve_timestamp: bool | None = None
    ) -> CopyResult:
        """Copy a file into a directory under its own name."""
        ...


@runtime_checkable
class TreeCopier(Protocol):
    """Protocol for recursive directory copies."""

    def copy_directory(self, source: Path, destination: Path) -> TreeCopyResult:
        """Mirror a directory tree.

        Args:
            source: Existing directory.
            destination: Target directory, created if missing.

        Returns:
            TreeCopyResult with aggregated totals.
        """
        ...


@runtime_checkable
class Deleter(Protocol):
    """Protocol for forced deletes."""

    def force_delete(self, path: Path) -> DeleteResult:
        """Delete a file or a whole directory tree.

        Args:
            path: Target to delete.

        Returns:
            DeleteResult describing what was removed.
        """
        ...

    def delete_directory(self, path: Path) -> DeleteResult:
        """Delete a directory tree if present."""
        ...

    def clean_directory(self, path: Path) -> DeleteResult:
        """Delete the contents of a directory, keeping it."""
        ...

    def delete_quietly(self, path: Path) -> bool:
        """Delete without raising; report whether the path is gone."""
        ...

