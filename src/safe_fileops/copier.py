"""Single file copy with modification time preservation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from safe_fileops.classify import PathClassifier
from safe_fileops.config import FileOpsSettings
from safe_fileops.errors import (
    InvalidArgumentError,
    IOFailureError,
    SelfOverlapError,
)
from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import FileSystem
from safe_fileops.types import CopyOperation, CopyResult, PathKind
from safe_fileops.validation import require_path

logger = logging.getLogger(__name__)


class SingleFileCopier:
    """Copies one file's bytes and, optionally, its timestamps.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        classifier: PathClassifier,
        settings: FileOpsSettings,
    ) -> None:
        """Initialize copier with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            classifier: Path classifier sharing the same filesystem (required).
            settings: Buffer size and timestamp defaults (required).
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
    ) -> SingleFileCopier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            classifier: Optional classifier (created if not provided).
            settings: Optional settings (defaults if not provided).

        Returns:
            Configured SingleFileCopier instance.
        """
        fs = filesystem or RealFileSystem()
        return cls(
            filesystem=fs,
            classifier=classifier or PathClassifier(fs),
            settings=settings or FileOpsSettings(),
        )

    def copy_file(
        self,
        source: str | os.PathLike[str] | None,
        destination: str | os.PathLike[str] | None,
        preserve_timestamp: bool | None = None,
    ) -> CopyResult:
        """Copy a file, overwriting the destination in full.

        Args:
            source: Existing regular file.
            destination: Target file. Missing parent directories are created.
            preserve_timestamp: Copy the source modification time. None uses
                the configured default.

        Returns:
            CopyResult with bytes copied and advisory warnings.

        Raises:
            InvalidArgumentError: If source is missing or a directory.
            SelfOverlapError: If source and destination are the same file.
            IOFailureError: If the parent can't be created, the destination is
                a directory, or the copy comes up short.
        """
        op_name = "copy_file"
        src = require_path(source, "source", op_name)
        dst = require_path(destination, "destination", op_name)
        if preserve_timestamp is None:
            preserve_timestamp = self.settings.preserve_timestamps

        kind = self.classifier.classify(src)
        if kind is PathKind.MISSING:
            raise InvalidArgumentError("source does not exist", path=src, operation=op_name)
        if kind is PathKind.DIRECTORY:
            raise InvalidArgumentError("source is a directory", path=src, operation=op_name)
        if self.classifier.is_same_file(src, dst):
            raise SelfOverlapError(
                f"source and destination are the same file ({dst})",
                path=src,
                operation=op_name,
            )

        self._ensure_parent(dst, op_name)
        if self.fs.is_dir(dst):
            raise IOFailureError("destination is a directory", path=dst, operation=op_name)

        operation = CopyOperation(source=src, destination=dst, preserve_timestamp=preserve_timestamp)
        return self._do_copy(operation)

    def copy_file_to_directory(
        self,
        source: str | os.PathLike[str] | None,
        directory: str | os.PathLike[str] | None,
        preserve_timestamp: bool | None = None,
    ) -> CopyResult:
        """Copy a file into a directory under its own name.

        Args:
            source: Existing regular file.
            directory: Target directory, created if missing.
            preserve_timestamp: Copy the source modification time.

        Returns:
            CopyResult for the copy.

        Raises:
            InvalidArgumentError: If directory exists and is not a directory.
            SelfOverlapError: If source already lives in directory.
        """
        op_name = "copy_file_to_directory"
        src = require_path(source, "source", op_name)
        target_dir = require_path(directory, "directory", op_name)
        if self.fs.exists(target_dir) and not self.fs.is_dir(target_dir):
            raise InvalidArgumentError(
                "destination is not a directory", path=target_dir, operation=op_name
            )
        return self.copy_file(src, target_dir / src.name, preserve_timestamp)

    def _ensure_parent(self, destination: Path, op_name: str) -> None:
        """Create the destination's parent directory if needed."""
        parent = destination.parent
        if self.fs.is_dir(parent):
            return
        if self.fs.exists(parent):
            raise IOFailureError(
                "destination parent exists and is not a directory", path=parent, operation=op_name
            )
        try:
            self.fs.mkdir(parent, parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailureError(
                f"cannot create destination directory: {e}", path=parent, operation=op_name
            ) from e
        if not self.fs.is_dir(parent):
            raise IOFailureError(
                "destination directory was not created", path=parent, operation=op_name
            )

    def _do_copy(self, operation: CopyOperation) -> CopyResult:
        """Stream bytes, verify the count, then apply timestamps."""
        src, dst = operation.source, operation.destination
        try:
            with self.fs.open_binary(src, "rb") as reader:
                source_stat = self.fs.stat(src)
                expected = source_stat.st_size
                with self.fs.open_binary(dst, "wb") as writer:
                    written = self._stream(reader, writer)
        except OSError as e:
            raise IOFailureError(f"copy failed: {e}", path=src, operation="copy_file") from e

        if written != expected:
            raise IOFailureError(
                f"failed to copy full contents: wrote {written} of {expected} bytes to {dst}",
                path=src,
                operation="copy_file",
            )

        result = CopyResult(operation=operation, bytes_copied=written)
        if operation.preserve_timestamp:
            self._apply_timestamps(dst, source_stat, result)
        logger.debug("Copied %s -> %s (%d bytes)", src, dst, written)
        return result

    def _stream(self, reader: BinaryIO, writer: BinaryIO) -> int:
        """Copy reader to writer in buffer-sized chunks."""
        total = 0
        buffer_size = self.settings.buffer_size
        while True:
            chunk = reader.read(buffer_size)
            if not chunk:
                break
            total += writer.write(chunk)
        return total

    def _apply_timestamps(
        self, destination: Path, source_stat: os.stat_result, result: CopyResult
    ) -> None:
        """Best effort: copy atime/mtime onto the destination.

        A rejected update is recorded as a warning; the copy stands.
        """
        try:
            self.fs.set_times(destination, source_stat.st_atime_ns, source_stat.st_mtime_ns)
        except OSError as e:
            message = f"could not preserve timestamp on {destination}: {e}"
            logger.warning("copy_file: %s", message)
            result.warnings.append(message)
