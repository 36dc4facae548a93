"""Filesystem checks shared by the argument parser and BackupConfig."""

import os
from pathlib import Path


def check_directory(value: str | Path) -> Path:
    """Return ``value`` as a Path, or raise ValueError if it is not an existing directory."""
    path = Path(value)
    if not path.is_dir():
        raise ValueError(f"Destination directory does not exist: {value}")
    return path


def check_executable(value: str | Path) -> Path:
    """Return ``value`` as a Path, or raise ValueError if it is not an executable file."""
    path = Path(value)
    if not path.is_file():
        raise ValueError(f"Executable not found: {value}")
    if not os.access(path, os.X_OK):
        raise ValueError(f"File is not executable: {value}")
    return path
