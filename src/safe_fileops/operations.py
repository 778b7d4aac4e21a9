"""Module-level shortcuts over a lazily created default context."""

from __future__ import annotations

import os

from safe_fileops.context import FileOpsContext, create_context
from safe_fileops.types import CopyResult, DeleteResult, TreeCopyResult

PathArg = str | os.PathLike[str] | None

_default_context: FileOpsContext | None = None


def get_default_context() -> FileOpsContext:
    """Return the shared context, creating it on first use."""
    global _default_context
    if _default_context is None:
        _default_context = create_context()
    return _default_context


def set_default_context(context: FileOpsContext | None) -> None:
    """Replace the shared context. None resets it to be recreated lazily."""
    global _default_context
    _default_context = context


def copy_file(
    source: PathArg, destination: PathArg, preserve_timestamp: bool | None = None
) -> CopyResult:
    """Copy one file. See SingleFileCopier.copy_file."""
    return get_default_context().copier.copy_file(source, destination, preserve_timestamp)


def copy_file_to_directory(
    source: PathArg, directory: PathArg, preserve_timestamp: bool | None = None
) -> CopyResult:
    """Copy a file into a directory. See SingleFileCopier.copy_file_to_directory."""
    return get_default_context().copier.copy_file_to_directory(
        source, directory, preserve_timestamp
    )


def copy_directory(source: PathArg, destination: PathArg) -> TreeCopyResult:
    """Copy a directory tree. See DirectoryTreeCopier.copy_directory."""
    return get_default_context().tree_copier.copy_directory(source, destination)


def force_delete(path: PathArg) -> DeleteResult:
    """Delete a file or tree. See ForceDeleter.force_delete."""
    return get_default_context().deleter.force_delete(path)


def delete_directory(path: PathArg) -> DeleteResult:
    """Delete a directory tree if present."""
    return get_default_context().deleter.delete_directory(path)


def clean_directory(path: PathArg) -> DeleteResult:
    """Empty a directory."""
    return get_default_context().deleter.clean_directory(path)


def delete_quietly(path: PathArg) -> bool:
    """Delete without raising."""
    return get_default_context().deleter.delete_quietly(path)


def size_of_directory(path: PathArg) -> int:
    """Total bytes under a directory."""
    return get_default_context().sizer.size_of_directory(path)


def size_of(path: PathArg) -> int:
    """Bytes in a file or directory tree."""
    return get_default_context().sizer.size_of(path)


def content_equals(first: PathArg, second: PathArg) -> bool:
    """Compare two files byte for byte."""
    return get_default_context().io.content_equals(first, second)
