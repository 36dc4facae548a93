"""Artifact naming: <hostname>-<database>-<timestamp>.sql.gz"""

from datetime import datetime
from pathlib import Path

TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"
DUMP_SUFFIX = ".sql"
COMPRESSED_SUFFIX = ".sql.gz"


def backup_basename(hostname: str, database: str, timestamp: datetime) -> str:
    """Base filename shared by the dump and its compressed artifact."""
    return f"{hostname}-{database}-{timestamp.strftime(TIMESTAMP_FORMAT)}"


def unique_basename(destination: Path, hostname: str, database: str, timestamp: datetime) -> str:
    """Like backup_basename, with a numeric suffix if that name is already taken.

    A database requested twice within the same second would otherwise
    overwrite (or fail to compress over) its earlier artifact.
    """
    base = backup_basename(hostname, database, timestamp)
    candidate = base
    counter = 0
    while (destination / f"{candidate}{DUMP_SUFFIX}").exists() or (
        destination / f"{candidate}{COMPRESSED_SUFFIX}"
    ).exists():
        counter += 1
        candidate = f"{base}-{counter}"
    return candidate
