"""Application context for dependency injection.

This module separates object creation from object use. Every service in a
context shares one filesystem and one settings object, so substituting a
test double in one place reaches all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from safe_fileops.classify import PathClassifier
from safe_fileops.config import FileOpsSettings, load_settings
from safe_fileops.copier import SingleFileCopier
from safe_fileops.delete import ForceDeleter
from safe_fileops.fileio import FileIO
from safe_fileops.filesystem import RealFileSystem
from safe_fileops.protocols import Deleter, FileCopier, FileSystem, TreeCopier
from safe_fileops.sizing import SizeAccumulator
from safe_fileops.tree import DirectoryTreeCopier


@dataclass
class FileOpsContext:
    """Container for the file operation services.

    Copy and delete services are typed by Protocol, so test doubles can be
    injected without inheritance.

    Construct directly with test doubles in tests; use `create_context()`
    in production code.
    """

    filesystem: FileSystem
    settings: FileOpsSettings
    classifier: PathClassifier
    copier: FileCopier
    tree_copier: TreeCopier
    deleter: Deleter
    sizer: SizeAccumulator
    io: FileIO


def create_context(
    settings: FileOpsSettings | None = None,
    filesystem: FileSystem | None = None,
    config_path: Path | None = None,
) -> FileOpsContext:
    """Factory for file operation services.

    Args:
        settings: Explicit settings. Takes precedence over config_path.
        filesystem: Override the filesystem primitives (for testing).
        config_path: Settings file to load when settings is not given.

    Returns:
        Configured FileOpsContext with all services wired together.
    """
    settings = settings or load_settings(config_path)
    fs = filesystem or RealFileSystem()
    classifier = PathClassifier(fs)
    copier = SingleFileCopier(fs, classifier, settings)

    return FileOpsContext(
        filesystem=fs,
        settings=settings,
        classifier=classifier,
        copier=copier,
        tree_copier=DirectoryTreeCopier(fs, classifier, copier, settings),
        deleter=ForceDeleter(fs, classifier),
        sizer=SizeAccumulator(fs, classifier, settings),
        io=FileIO(fs, classifier, settings),
    )
