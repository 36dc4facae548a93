"""dbbackup - back up MySQL databases with mysqldump and gzip.

This package provides:
- cli: the mysql-backup command line entry point
- config: option parsing results, environment defaults and BackupConfig
- backup: the per-database executor, command runner and reporter
- logger: structured logging with session tracking and JSON support
- exceptions: error classes with structured error info
"""

__version__ = "1.0.0"

from dbbackup.backup import (
    BackupOutcome,
    BackupService,
    CommandResult,
    CommandRunner,
    SubprocessRunner,
    report,
)
from dbbackup.config import BackupConfig, CliOptions, resolve_config
from dbbackup.exceptions import (
    BackupError,
    ConfigurationError,
    DbBackupError,
    ToolNotFoundError,
    UsageError,
)
from dbbackup.logger import Logger, StructuredLogger, get_logger

__all__ = [
    "__version__",
    # Backup
    "BackupOutcome",
    "BackupService",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "report",
    # Config
    "BackupConfig",
    "CliOptions",
    "resolve_config",
    # Exceptions
    "DbBackupError",
    "UsageError",
    "ConfigurationError",
    "ToolNotFoundError",
    "BackupError",
    # Logger
    "Logger",
    "StructuredLogger",
    "get_logger",
]
