"""Whole-file read/write helpers and small filesystem utilities.

These are the plumbing pieces around the copy and delete engines:
reading and writing bytes or text, touching files, comparing contents,
creating directories and waiting for a path to appear.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from safe_fileops.classify import PathClassifier
from safe_fileops.config import FileOpsSettings
from safe_fileops.errors import InvalidArgumentError, IOFailureError
from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import FileSystem
from safe_fileops.types import PathKind
from safe_fileops.validation import require_path

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str] | None


class FileIO:
    """Read, write and inspect single files through a FileSystem."""

    def __init__(
        self,
        filesystem: FileSystem,
        classifier: PathClassifier,
        settings: FileOpsSettings,
    ) -> None:
        """Initialize with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            classifier: Path classifier (required).
            settings: Buffer size and polling interval (required).
        """
        self.fs = filesystem
        self.classifier = classifier
        self.settings = settings

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        settings: FileOpsSettings | None = None,
    ) -> FileIO:
        """Factory method for production instantiation."""
        fs = filesystem or RealFileSystem()
        return cls(
            filesystem=fs,
            classifier=PathClassifier(fs),
            settings=settings or FileOpsSettings(),
        )

    def read_bytes(self, path: PathArg) -> bytes:
        """Read a whole file.

        Raises:
            InvalidArgumentError: If path is missing or a directory.
            IOFailureError: If reading fails.
        """
        source = self._existing_file(path, "read_bytes")
        try:
            with self.fs.open_binary(source, "rb") as reader:
                return reader.read()
        except OSError as e:
            raise IOFailureError(f"read failed: {e}", path=source, operation="read_bytes") from e

    def write_bytes(self, path: PathArg, data: bytes) -> None:
        """Write a whole file, creating parent directories.

        Raises:
            IOFailureError: If the parent can't be created or writing fails.
        """
        target = require_path(path, "path", "write_bytes")
        self.force_mkdir(target.parent)
        try:
            with self.fs.open_binary(target, "wb") as writer:
                writer.write(data)
        except OSError as e:
            raise IOFailureError(f"write failed: {e}", path=target, operation="write_bytes") from e

    def read_text(self, path: PathArg, encoding: str = "utf-8") -> str:
        """Read a whole file as text."""
        return self.read_bytes(path).decode(encoding)

    def write_text(self, path: PathArg, text: str, encoding: str = "utf-8") -> None:
        """Write text to a file, replacing its content."""
        self.write_bytes(path, text.encode(encoding))

    def touch(self, path: PathArg) -> None:
        """Create an empty file, or bump an existing file's modification time.

        Existing content is left alone.
        """
        target = require_path(path, "path", "touch")
        if not self.fs.exists(target):
            self.write_bytes(target, b"")
            return
        now = time.time_ns()
        try:
            self.fs.set_times(target, now, now)
        except OSError as e:
            raise IOFailureError(
                f"cannot update modification time: {e}", path=target, operation="touch"
            ) from e

    def content_equals(self, first: PathArg, second: PathArg) -> bool:
        """Compare two files byte for byte.

        Two missing files are equal; a missing and an existing file are not.

        Raises:
            IOFailureError: If either path is a directory or reading fails.
        """
        op_name = "content_equals"
        a = require_path(first, "first", op_name)
        b = require_path(second, "second", op_name)

        a_kind = self.classifier.classify(a)
        b_kind = self.classifier.classify(b)
        if a_kind is PathKind.MISSING or b_kind is PathKind.MISSING:
            return a_kind is b_kind
        for path, kind in ((a, a_kind), (b, b_kind)):
            if kind is PathKind.DIRECTORY:
                raise IOFailureError("cannot compare directories", path=path, operation=op_name)

        try:
            if self.fs.stat(a).st_size != self.fs.stat(b).st_size:
                return False
            if self.classifier.is_same_file(a, b):
                return True
            buffer_size = self.settings.buffer_size
            with self.fs.open_binary(a, "rb") as left, self.fs.open_binary(b, "rb") as right:
                while True:
                    left_chunk = left.read(buffer_size)
                    right_chunk = right.read(buffer_size)
                    if left_chunk != right_chunk:
                        return False
                    if not left_chunk:
                        return True
        except OSError as e:
            raise IOFailureError(f"compare failed: {e}", path=a, operation=op_name) from e

    def force_mkdir(self, path: PathArg) -> None:
        """Create a directory and any missing parents.

        Raises:
            IOFailureError: If a non-directory is in the way or creation fails.
        """
        target = require_path(path, "path", "force_mkdir")
        if self.fs.is_dir(target):
            return
        if self.fs.lexists(target):
            raise IOFailureError(
                "path exists and is not a directory", path=target, operation="force_mkdir"
            )
        try:
            self.fs.mkdir(target, parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailureError(
                f"cannot create directory: {e}", path=target, operation="force_mkdir"
            ) from e
        if not self.fs.is_dir(target):
            raise IOFailureError(
                "directory was not created", path=target, operation="force_mkdir"
            )

    def wait_for(self, path: PathArg, seconds: float) -> bool:
        """Poll until a path exists or the timeout runs out.

        A non-positive timeout checks exactly once.

        Returns:
            True if the path exists.
        """
        target = require_path(path, "path", "wait_for")
        deadline = time.monotonic() + max(seconds, 0)
        while True:
            if self.fs.exists(target):
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.debug("Gave up waiting for %s after %ss", target, seconds)
                return False
            time.sleep(min(self.settings.wait_poll_interval, remaining))

    def _existing_file(self, path: PathArg, op_name: str) -> Path:
        source = require_path(path, "path", op_name)
        kind = self.classifier.classify(source)
        if kind is PathKind.MISSING:
            raise InvalidArgumentError("file does not exist", path=source, operation=op_name)
        if kind is PathKind.DIRECTORY:
            raise InvalidArgumentError("path is a directory", path=source, operation=op_name)
        return source
