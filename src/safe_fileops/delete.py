"""Forced deletion of files and directory trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from safe_fileops.classify import PathClassifier
from safe_fileops.errors import FileOpsError, InvalidArgumentError, IOFailureError
from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import FileSystem
from safe_fileops.types import DeleteOperation, DeleteResult, PathKind
from safe_fileops.validation import require_path

logger = logging.getLogger(__name__)


class ForceDeleter:
    """Deletes files and whole directory trees.

    Every removal is verified by checking that the path is gone afterwards,
    instead of trusting the underlying call. Symlinks inside a tree are
    unlinked, never followed. There is no rollback: a failure partway leaves
    the partially deleted tree as it is.
    """

    def __init__(self, filesystem: FileSystem, classifier: PathClassifier) -> None:
        """Initialize deleter with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            classifier: Path classifier (required).
        """
        self.fs = filesystem
        self.classifier = classifier

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> ForceDeleter:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured ForceDeleter instance.
        """
        fs = filesystem or RealFileSystem()
        return cls(filesystem=fs, classifier=PathClassifier(fs))

    def force_delete(self, path: str | os.PathLike[str] | None) -> DeleteResult:
        """Delete a file, or a directory and all of its contents.

        A path that is already absent counts as deleted and is reported with
        ``existed=False``. Callers that want a missing path to be an error
        check existence first.

        Args:
            path: File, directory or symlink to delete.

        Returns:
            DeleteResult with counts of removed entries.

        Raises:
            InvalidArgumentError: If path is None.
            IOFailureError: If any entry could not be removed.
        """
        target = require_path(path, "path", "force_delete")
        operation = DeleteOperation(target=target)
        if not self.fs.lexists(target):
            logger.debug("Nothing to delete at %s", target)
            return DeleteResult(operation=operation, existed=False)

        result = DeleteResult(operation=operation, existed=True)
        self._delete_entry(target, result)
        logger.info(
            "Deleted %s (%d files, %d directories)",
            target,
            result.files_deleted,
            result.directories_deleted,
        )
        return result

    def delete_directory(self, path: str | os.PathLike[str] | None) -> DeleteResult:
        """Delete a directory tree, doing nothing if it is absent.

        Raises:
            InvalidArgumentError: If path exists and is not a directory.
            IOFailureError: If any entry could not be removed.
        """
        target = require_path(path, "path", "delete_directory")
        if self.fs.lexists(target) and not self.fs.is_symlink(target):
            if not self.fs.is_dir(target):
                raise InvalidArgumentError(
                    "not a directory", path=target, operation="delete_directory"
                )
        return self.force_delete(target)

    def clean_directory(self, path: str | os.PathLike[str] | None) -> DeleteResult:
        """Delete everything inside a directory, keeping the directory.

        Raises:
            InvalidArgumentError: If path is missing or not a directory.
            IOFailureError: If any entry could not be removed.
        """
        op_name = "clean_directory"
        target = require_path(path, "path", op_name)
        kind = self.classifier.classify(target)
        if kind is PathKind.MISSING:
            raise InvalidArgumentError("directory does not exist", path=target, operation=op_name)
        if kind is not PathKind.DIRECTORY:
            raise InvalidArgumentError("not a directory", path=target, operation=op_name)

        result = DeleteResult(operation=DeleteOperation(target=target), existed=True)
        for child in self._list(target):
            self._delete_entry(child, result)
        return result

    def delete_quietly(self, path: str | os.PathLike[str] | None) -> bool:
        """Delete without raising.

        Failures are logged at WARNING level.

        Returns:
            True if the path no longer exists afterwards.
        """
        if path is None:
            return False
        try:
            target = require_path(path, "path", "delete_quietly")
        except InvalidArgumentError as e:
            logger.warning("Quiet delete skipped: %s", e)
            return False
        try:
            self.force_delete(target)
        except (FileOpsError, OSError) as e:
            logger.warning("Quiet delete of %s failed: %s", target, e)
        return not self.fs.lexists(target)

    def _delete_entry(self, path: Path, result: DeleteResult) -> None:
        """Depth first: children before their parent."""
        if self.fs.is_symlink(path) or not self.fs.is_dir(path):
            self._remove(path, directory=False)
            result.files_deleted += 1
            return

        for child in self._list(path):
            self._delete_entry(child, result)
        self._remove(path, directory=True)
        result.directories_deleted += 1

    def _list(self, directory: Path) -> list[Path]:
        try:
            return self.fs.list_dir(directory)
        except OSError as e:
            raise IOFailureError(
                f"cannot list directory: {e}", path=directory, operation="force_delete"
            ) from e

    def _remove(self, path: Path, directory: bool) -> None:
        """Remove one entry and verify it is gone."""
        error: OSError | None = None
        try:
            if directory:
                self.fs.rmdir(path)
            else:
                self.fs.unlink(path)
        except OSError as e:
            error = e

        if self.fs.lexists(path):
            what = "directory" if directory else "file"
            detail = f": {error}" if error else ""
            raise IOFailureError(
                f"unable to delete {what}{detail}", path=path, operation="force_delete"
            ) from error
        if error is not None:
            logger.debug("Delete of %s reported %s but the path is gone", path, error)
