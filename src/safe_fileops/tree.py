"""Recursive directory copy."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from safe_fileops.classify import PathClassifier
from safe_fileops.config import FileOpsSettings
from safe_fileops.copier import SingleFileCopier
from safe_fileops.errors import IOFailureError, SelfOverlapError
from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import FileSystem
from safe_fileops.types import PathKind, SymlinkPolicy, TreeCopyResult
from safe_fileops.validation import require_path

logger = logging.getLogger(__name__)


class DirectoryTreeCopier:
    """Mirrors a directory tree onto a destination.

    The copy is not transactional. The first failure aborts the traversal
    and propagates; whatever was copied up to that point stays on disk.
    Callers that need all-or-nothing can copy into a temporary sibling and
    rename it into place.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        classifier: PathClassifier,
        file_copier: SingleFileCopier,
        settings: FileOpsSettings,
    ) -> None:
        """Initialize tree copier with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            classifier: Path classifier (required).
            file_copier: Copier used for every leaf file (required).
            settings: Symlink policy (required).
        """
        self.fs = filesystem
        self.classifier = classifier
        self.file_copier = file_copier
        self.settings = settings

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        settings: FileOpsSettings | None = None,
    ) -> DirectoryTreeCopier:
        """Factory method for production instantiation.

        Creates the classifier and file copier over one shared filesystem.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            settings: Optional settings (defaults if not provided).

        Returns:
            Configured DirectoryTreeCopier instance.
        """
        fs = filesystem or RealFileSystem()
        settings = settings or FileOpsSettings()
        classifier = PathClassifier(fs)
        return cls(
            filesystem=fs,
            classifier=classifier,
            file_copier=SingleFileCopier(fs, classifier, settings),
            settings=settings,
        )

    def copy_directory(
        self,
        source: str | os.PathLike[str] | None,
        destination: str | os.PathLike[str] | None,
    ) -> TreeCopyResult:
        """Copy a directory and everything below it.

        Existing destination directories are merged into; existing files
        are overwritten. File timestamps are preserved.

        Args:
            source: Existing directory.
            destination: Target directory, created if missing.

        Returns:
            TreeCopyResult with totals and advisory warnings.

        Raises:
            InvalidArgumentError: If either argument is None.
            SelfOverlapError: If destination is source or lies inside it.
            IOFailureError: If source is missing or not a directory, if
                destination is a file, or on any failure during the copy.
        """
        op_name = "copy_directory"
        src = require_path(source, "source", op_name)
        dst = require_path(destination, "destination", op_name)

        kind = self.classifier.classify(src)
        if kind is PathKind.MISSING:
            raise IOFailureError("source does not exist", path=src, operation=op_name)
        if kind is not PathKind.DIRECTORY:
            raise IOFailureError("source is not a directory", path=src, operation=op_name)
        if self.classifier.classify(dst) is PathKind.FILE:
            raise IOFailureError(
                "destination exists and is not a directory", path=dst, operation=op_name
            )
        if self.classifier.is_ancestor_of(src, dst):
            raise SelfOverlapError(
                f"destination {dst} is the source or lies inside it",
                path=src,
                operation=op_name,
            )

        result = TreeCopyResult(source=src, destination=dst)
        roots = (self.classifier.canonical(src), self.classifier.canonical(dst))
        self._copy_tree(src, dst, roots, set(), result)
        logger.info(
            "Copied %s -> %s (%d files, %d bytes)",
            src,
            dst,
            result.files_copied,
            result.bytes_copied,
        )
        return result

    def _copy_tree(
        self,
        source: Path,
        destination: Path,
        roots: tuple[Path | None, Path | None],
        active: set[Path],
        result: TreeCopyResult,
    ) -> None:
        """Recursive step.

        ``active`` holds the canonical source directories on the current
        recursion path. ``roots`` are the canonical top-level source and
        destination; no source directory outside the source root may lie in
        the destination, and no followed link may lead to it or above it.
        """
        op_name = "copy_directory"
        canonical = self.classifier.canonical(source)
        if canonical is None:
            raise IOFailureError("cannot resolve directory", path=source, operation=op_name)
        if canonical in active:
            raise IOFailureError("symlink cycle detected", path=source, operation=op_name)
        if self._inside_output(canonical, roots):
            raise SelfOverlapError(
                "source directory lies inside the destination tree",
                path=source,
                operation=op_name,
            )
        active.add(canonical)
        try:
            self._ensure_directory(destination, result)
            try:
                children = self.fs.list_dir(source)
            except OSError as e:
                raise IOFailureError(
                    f"cannot list directory: {e}", path=source, operation=op_name
                ) from e

            for child in children:
                target = destination / child.name
                is_link = self.fs.is_symlink(child)
                if is_link:
                    policy = self.settings.symlink_policy
                    if policy is SymlinkPolicy.SKIP:
                        logger.debug("Skipping symlink %s", child)
                        continue
                    if policy is SymlinkPolicy.REJECT:
                        raise IOFailureError(
                            "symlinks are not allowed", path=child, operation=op_name
                        )

                kind = self.classifier.classify(child)
                if kind is PathKind.DIRECTORY:
                    if is_link and self._overlaps_destination(child, roots[1]):
                        raise SelfOverlapError(
                            "symlink leads into the destination tree or above it",
                            path=child,
                            operation=op_name,
                        )
                    self._copy_tree(child, target, roots, active, result)
                elif kind is PathKind.FILE:
                    result.add_file(self.file_copier.copy_file(child, target, True))
                else:
                    raise IOFailureError(
                        "entry vanished or is a dangling link", path=child, operation=op_name
                    )
        finally:
            active.discard(canonical)

    def _ensure_directory(self, directory: Path, result: TreeCopyResult) -> None:
        if self.fs.is_dir(directory):
            return
        if self.fs.lexists(directory):
            raise IOFailureError(
                "destination exists and is not a directory",
                path=directory,
                operation="copy_directory",
            )
        try:
            self.fs.mkdir(directory, parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailureError(
                f"cannot create directory: {e}", path=directory, operation="copy_directory"
            ) from e
        result.directories_created += 1
        logger.debug("Created directory %s", directory)

    def _overlaps_destination(self, link: Path, destination_root: Path | None) -> bool:
        """Check if a directory link resolves into the destination or an ancestor of it."""
        target = self.classifier.canonical(link)
        if target is None or destination_root is None:
            return True
        return _within(target, destination_root) or _within(destination_root, target)

    @staticmethod
    def _inside_output(directory: Path, roots: tuple[Path | None, Path | None]) -> bool:
        """Check if a source directory is part of the copy's own output.

        Directories under the source root are exempt so a tree can still be
        copied up into one of its ancestors.
        """
        source_root, destination_root = roots
        if source_root is None or destination_root is None:
            return True
        return _within(directory, destination_root) and not _within(directory, source_root)


def _within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents
