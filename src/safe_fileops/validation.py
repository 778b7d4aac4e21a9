"""Validation utilities for safe-fileops.

This module provides shared argument checks to eliminate duplication
across the copy, delete and sizing services.
"""

from __future__ import annotations

import os
from pathlib import Path

from safe_fileops.errors import InvalidArgumentError


def require_path(value: str | os.PathLike[str] | None, name: str, operation: str) -> Path:
    """Coerce a caller supplied path argument to a Path.

    Args:
        value: The argument as passed by the caller.
        name: Argument name for the error message.
        operation: Operation name for the error message.

    Returns:
        The argument as a Path.

    Raises:
        InvalidArgumentError: If the argument is missing or not path-like.

    Example:
        >>> require_path("a/b.txt", "source", "copy_file")
        PosixPath('a/b.txt')
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None", operation=operation)
    if isinstance(value, Path):
        return value
    if isinstance(value, (str, os.PathLike)):
        try:
            return Path(value)
        except TypeError as e:
            raise InvalidArgumentError(
                f"{name} is not a usable path: {e}", operation=operation
            ) from e
    raise InvalidArgumentError(
        f"{name} must be a path, got {type(value).__name__}", operation=operation
    )
