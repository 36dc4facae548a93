"""Configuration for dbbackup.

Example:
    from dbbackup.config import CliOptions, resolve_config

    config = resolve_config(CliOptions(databases=["shop"]))
"""

from dbbackup.config.env_loader import EnvLoader
from dbbackup.config.settings import (
    DEFAULT_PASSWORD,
    DEFAULT_USER,
    ENV_PREFIX,
    BackupConfig,
    CliOptions,
    resolve_config,
)
from dbbackup.config.validators import check_directory, check_executable

__all__ = [
    "BackupConfig",
    "CliOptions",
    "EnvLoader",
    "resolve_config",
    "check_directory",
    "check_executable",
    "ENV_PREFIX",
    "DEFAULT_USER",
    "DEFAULT_PASSWORD",
]
