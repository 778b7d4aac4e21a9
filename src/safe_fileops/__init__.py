"""Safer higher-level filesystem operations: copy, delete, sizing."""

__version__ = "0.1.0"

from safe_fileops.classify import PathClassifier
from safe_fileops.config import FileOpsSettings, load_settings
from safe_fileops.context import FileOpsContext, create_context
from safe_fileops.copier import SingleFileCopier
from safe_fileops.delete import ForceDeleter
from safe_fileops.errors import (
    FileOpsError,
    InvalidArgumentError,
    IOFailureError,
    SelfOverlapError,
    SizeOverflowError,
)
from safe_fileops.fileio import FileIO
from safe_fileops.operations import (
    clean_directory,
    content_equals,
    copy_directory,
    copy_file,
    copy_file_to_directory,
    delete_directory,
    delete_quietly,
    force_delete,
    size_of,
    size_of_directory,
)
from safe_fileops.sizing import SizeAccumulator
from safe_fileops.tree import DirectoryTreeCopier
from safe_fileops.types import (
    CopyOperation,
    CopyResult,
    DeleteOperation,
    DeleteResult,
    OverflowPolicy,
    PathKind,
    SymlinkPolicy,
    TreeCopyResult,
)

__all__ = [
    "__version__",
    "CopyOperation",
    "CopyResult",
    "DeleteOperation",
    "DeleteResult",
    "DirectoryTreeCopier",
    "FileIO",
    "FileOpsContext",
    "FileOpsError",
    "FileOpsSettings",
    "ForceDeleter",
    "IOFailureError",
    "InvalidArgumentError",
    "OverflowPolicy",
    "PathClassifier",
    "PathKind",
    "SelfOverlapError",
    "SingleFileCopier",
    "SizeAccumulator",
    "SizeOverflowError",
    "SymlinkPolicy",
    "TreeCopyResult",
    "clean_directory",
    "content_equals",
    "copy_directory",
    "copy_file",
    "copy_file_to_directory",
    "create_context",
    "delete_directory",
    "delete_quietly",
    "force_delete",
    "load_settings",
    "size_of",
    "size_of_directory",
]
