"""Path classification and overlap detection."""

from __future__ import annotations

import logging
from pathlib import Path

from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import FileSystem
from safe_fileops.types import PathKind

logger = logging.getLogger(__name__)


class PathClassifier:
    """Answers what a path is and whether two paths overlap.

    Nothing is cached: the filesystem may change between calls, so every
    query goes back to it.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize classifier.

        Args:
            filesystem: Filesystem abstraction (required).
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> PathClassifier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured PathClassifier instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    def classify(self, path: Path) -> PathKind:
        """Report what a path denotes right now.

        Symlinks are followed, so a dangling link is MISSING.
        """
        if self.fs.is_dir(path):
            return PathKind.DIRECTORY
        if self.fs.exists(path):
            return PathKind.FILE
        return PathKind.MISSING

    def canonical(self, path: Path) -> Path | None:
        """Resolve a path to its canonical absolute form.

        Args:
            path: Path to resolve. Need not exist.

        Returns:
            Canonical path, or None if resolution failed.
        """
        try:
            return self.fs.resolve(path)
        except (OSError, RuntimeError) as e:
            logger.debug("Cannot canonicalize %s: %s", path, e)
            return None

    def is_same_path(self, first: Path, second: Path) -> bool:
        """Check if two paths name the same location.

        Returns True when either side cannot be canonicalized.
        """
        first_canonical = self.canonical(first)
        second_canonical = self.canonical(second)
        if first_canonical is None or second_canonical is None:
            return True
        return first_canonical == second_canonical

    def is_same_file(self, first: Path, second: Path) -> bool:
        """Check if two paths reach the same file.

        Extends is_same_path with a device and inode comparison when both
        paths exist, so hard links to one file are recognised. A failed stat
        counts as the same file.
        """
        if self.is_same_path(first, second):
            return True
        if not (self.fs.exists(first) and self.fs.exists(second)):
            return False
        try:
            first_stat = self.fs.stat(first)
            second_stat = self.fs.stat(second)
        except OSError as e:
            logger.debug("Cannot stat %s or %s: %s", first, second, e)
            return True
        return (first_stat.st_dev, first_stat.st_ino) == (second_stat.st_dev, second_stat.st_ino)

    def is_ancestor_of(self, candidate_ancestor: Path, path: Path) -> bool:
        """Check if path is candidate_ancestor itself or nested under it.

        Both sides are compared in canonical form. When either side cannot
        be canonicalized the answer is True, so callers refuse the operation.

        Args:
            candidate_ancestor: Possible enclosing directory.
            path: Path to test.

        Returns:
            True if path lies within candidate_ancestor.
        """
        ancestor_canonical = self.canonical(candidate_ancestor)
        path_canonical = self.canonical(path)
        if ancestor_canonical is None or path_canonical is None:
            return True
        return path_canonical == ancestor_canonical or ancestor_canonical in path_canonical.parents
