"""Exceptions for dbbackup.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context

Usage:
    from dbbackup.exceptions import DbBackupError, UsageError, ToolNotFoundError
"""

from dbbackup.exceptions.base import (
    BackupError,
    ConfigurationError,
    DbBackupError,
    ToolNotFoundError,
    UsageError,
)

__all__ = [
    "DbBackupError",
    "UsageError",
    "ConfigurationError",
    "ToolNotFoundError",
    "BackupError",
]
