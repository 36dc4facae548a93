"""
dbbackup logger module

Usage:
    from dbbackup.logger import get_logger

    logger = get_logger()
    logger.info("Backup started", databases=3)

Environment Variables:
    DBBACKUP_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    DBBACKUP_LOG_FILE: Optional file path for log output
    DBBACKUP_LOG_JSON: Set to "true" for JSON output format
"""

import logging
import os
from typing import Mapping, Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "dbbackup" -> "DBBACKUP"
        "db-backup" -> "DB_BACKUP"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "dbbackup",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Logger:
    """Create a new logger instance.

    Parameters that are not provided are read from ``env`` (default:
    ``os.environ``) using {PREFIX}_LOG_LEVEL, {PREFIX}_LOG_FILE and
    {PREFIX}_LOG_JSON, where PREFIX is derived from the name.
    """
    env = os.environ if env is None else env
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = env.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)

    if log_file is None:
        log_file = env.get(f"{env_prefix}_LOG_FILE") or None

    if json_format is None:
        json_format = env.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "dbbackup", env: Optional[Mapping[str, str]] = None) -> Logger:
    """Get a logger configured from environment variables."""
    return create_logger(name=name, env=env)


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
]
