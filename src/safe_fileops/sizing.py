"""Byte size computation for files and directory trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from safe_fileops.classify import PathClassifier
from safe_fileops.config import FileOpsSettings
from safe_fileops.errors import InvalidArgumentError, IOFailureError, SizeOverflowError
from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import FileSystem
from safe_fileops.types import UINT64_MAX, OverflowPolicy, PathKind, SymlinkPolicy
from safe_fileops.validation import require_path

logger = logging.getLogger(__name__)


class SizeAccumulator:
    """Sums regular file sizes across a tree.

    Totals are unsigned 64-bit. Past UINT64_MAX the configured overflow
    policy either raises SizeOverflowError or saturates at UINT64_MAX.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        classifier: PathClassifier,
        settings: FileOpsSettings,
    ) -> None:
        """Initialize accumulator with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            classifier: Path classifier (required).
            settings: Symlink and overflow policies (required).
        """
        self.fs = filesystem
        self.classifier = classifier
        self.settings = settings

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        classifier: PathClassifier | None = None,
        settings: FileOpsSettings | None = None,
    ) -> SizeAccumulator:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            classifier: Optional classifier (created if not provided).
            settings: Optional settings (defaults if not provided).

        Returns:
            Configured SizeAccumulator instance.
        """
        fs = filesystem or RealFileSystem()
        return cls(
            filesystem=fs,
            classifier=classifier or PathClassifier(fs),
            settings=settings or FileOpsSettings(),
        )

    def size_of_directory(self, path: str | os.PathLike[str] | None) -> int:
        """Total size of every regular file under a directory.

        Args:
            path: Existing directory.

        Returns:
            Sum of file sizes in bytes. Directories contribute 0.

        Raises:
            InvalidArgumentError: If path is missing or not a directory.
            IOFailureError: On unreadable entries, rejected links or link cycles.
            SizeOverflowError: If the total overflows and the policy is ERROR.
        """
        op_name = "size_of_directory"
        directory = require_path(path, "path", op_name)
        kind = self.classifier.classify(directory)
        if kind is PathKind.MISSING:
            raise InvalidArgumentError("directory does not exist", path=directory, operation=op_name)
        if kind is not PathKind.DIRECTORY:
            raise InvalidArgumentError("not a directory", path=directory, operation=op_name)
        return self._directory_total(directory, set(), op_name)

    def size_of(self, path: str | os.PathLike[str] | None) -> int:
        """Size of a file, or of a whole tree for a directory.

        Raises:
            InvalidArgumentError: If path does not exist.
        """
        op_name = "size_of"
        target = require_path(path, "path", op_name)
        kind = self.classifier.classify(target)
        if kind is PathKind.MISSING:
            raise InvalidArgumentError("path does not exist", path=target, operation=op_name)
        if kind is PathKind.DIRECTORY:
            return self._directory_total(target, set(), op_name)
        return self._file_size(target, op_name)

    def _directory_total(self, directory: Path, active: set[Path], op_name: str) -> int:
        """Recursive sum. ``active`` holds canonical directories on the current path."""
        canonical = self.classifier.canonical(directory)
        if canonical is None:
            raise IOFailureError("cannot resolve directory", path=directory, operation=op_name)
        if canonical in active:
            raise IOFailureError("symlink cycle detected", path=directory, operation=op_name)
        active.add(canonical)
        try:
            try:
                children = self.fs.list_dir(directory)
            except OSError as e:
                raise IOFailureError(
                    f"cannot list directory: {e}", path=directory, operation=op_name
                ) from e

            total = 0
            for child in children:
                if self.fs.is_symlink(child):
                    policy = self.settings.symlink_policy
                    if policy is SymlinkPolicy.SKIP:
                        logger.debug("Skipping symlink %s", child)
                        continue
                    if policy is SymlinkPolicy.REJECT:
                        raise IOFailureError(
                            "symlinks are not allowed", path=child, operation=op_name
                        )
                if self.fs.is_dir(child):
                    size = self._directory_total(child, active, op_name)
                elif self.fs.is_file(child):
                    size = self._file_size(child, op_name)
                else:
                    # dangling link or special file
                    logger.debug("Not counting %s", child)
                    continue
                total = self._add(total, size, child, op_name)
            return total
        finally:
            active.discard(canonical)

    def _file_size(self, path: Path, op_name: str) -> int:
        try:
            return self.fs.stat(path).st_size
        except OSError as e:
            raise IOFailureError(f"cannot stat file: {e}", path=path, operation=op_name) from e

    def _add(self, total: int, size: int, path: Path, op_name: str) -> int:
        combined = total + size
        if combined <= UINT64_MAX:
            return combined
        if self.settings.size_overflow is OverflowPolicy.SATURATE:
            logger.warning("Size total saturated at %d bytes near %s", UINT64_MAX, path)
            return UINT64_MAX
        raise SizeOverflowError(
            "total size exceeds unsigned 64-bit range", path=path, operation=op_name
        )
