"""Filesystem primitives.

This module provides the primitive operations the services are built on.
The RealFileSystem implementation wraps standard library operations;
tests substitute doubles to simulate failures the real platform will not
produce on demand.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and os operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def lexists(self, path: Path) -> bool:
        """Check if a path exists, counting dangling links."""
        return os.path.lexists(path)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def stat(self, path: Path) -> os.stat_result:
        """Get status of a path."""
        return path.stat()

    def list_dir(self, path: Path) -> list[Path]:
        """List immediate children of a directory."""
        return sorted(path.iterdir())

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def open_binary(self, path: Path, mode: str) -> BinaryIO:
        """Open a file in binary mode."""
        if mode not in ("rb", "wb"):
            raise ValueError(f"Unsupported mode: {mode!r}")
        return open(path, mode)  # noqa: SIM115

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        path.rmdir()

    def set_times(self, path: Path, atime_ns: int, mtime_ns: int) -> None:
        """Set access and modification times."""
        os.utime(path, ns=(atime_ns, mtime_ns))

    def resolve(self, path: Path) -> Path:
        """Resolve a path to its canonical absolute form."""
        return path.resolve()
