"""Settings for file operations."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from safe_fileops.types import OverflowPolicy, SymlinkPolicy

# Default settings location
CONFIG_DIR = Path.home() / ".safe-fileops"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_BUFFER_SIZE = 64 * 1024


class FileOpsSettings(BaseModel):
    """Tunable behavior shared by all services."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, gt=0, alias="bufferSize")
    preserve_timestamps: bool = Field(default=True, alias="preserveTimestamps")
    symlink_policy: SymlinkPolicy = Field(default=SymlinkPolicy.FOLLOW, alias="symlinkPolicy")
    size_overflow: OverflowPolicy = Field(default=OverflowPolicy.ERROR, alias="sizeOverflow")
    wait_poll_interval: float = Field(default=0.1, gt=0, alias="waitPollInterval")

    @classmethod
    def from_file(cls, path: Path) -> FileOpsSettings:
        """Load settings from a JSON or YAML file.

        Args:
            path: Path to a .json, .yaml or .yml file.

        Returns:
            Parsed FileOpsSettings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the content is malformed or fails validation.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {path}: {e}") from e


def load_settings(path: Path | None = None) -> FileOpsSettings:
    """Load settings from a file, or the default location if present.

    Args:
        path: Explicit settings file. Must exist when given.

    Returns:
        FileOpsSettings from the file, or defaults.
    """
    if path is not None:
        return FileOpsSettings.from_file(path)
    if CONFIG_FILE.exists():
        return FileOpsSettings.from_file(CONFIG_FILE)
    return FileOpsSettings()
