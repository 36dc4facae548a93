"""Backup configuration and parameter resolution.

CLI options are merged with ``DBBACKUP_*`` environment variables (and a
``.env`` file) into a frozen BackupConfig. CLI values win over environment
values, which win over built-in defaults.

Environment variables:
    DBBACKUP_DESTINATION: Output directory (default: current directory)
    DBBACKUP_USER: mysqldump user (default: root)
    DBBACKUP_PASSWORD: mysqldump password (default: empty)
    DBBACKUP_MYSQLDUMP: Path to the mysqldump executable
    DBBACKUP_GZIP: Path to the gzip executable
"""

import shutil
import socket
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dbbackup.config.env_loader import EnvLoader
from dbbackup.config.validators import check_directory, check_executable
from dbbackup.exceptions import ToolNotFoundError, UsageError

ENV_PREFIX = "DBBACKUP"
DEFAULT_USER = "root"
DEFAULT_PASSWORD = ""
MYSQLDUMP = "mysqldump"
GZIP = "gzip"


@dataclass
class CliOptions:
    """Values collected by the argument parser, before defaults are applied."""

    databases: List[str] = field(default_factory=list)
    destination: Optional[Path] = None
    user: Optional[str] = None
    password: Optional[str] = None
    mysqldump: Optional[Path] = None
    gzip: Optional[Path] = None


class BackupConfig(BaseModel):
    """Resolved, immutable configuration for one backup run."""

    model_config = ConfigDict(frozen=True)

    destination: Path = Field(description="Existing directory receiving the artifacts")
    user: str = Field(default=DEFAULT_USER, description="mysqldump --user value")
    password: str = Field(default=DEFAULT_PASSWORD, description="mysqldump --password value")
    mysqldump: Path = Field(description="mysqldump executable")
    gzip: Path = Field(description="gzip executable")
    databases: List[str] = Field(description="Databases to back up, in order; duplicates allowed")
    hostname: str = Field(default_factory=socket.gethostname, description="Host name used in artifact names")

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: Path) -> Path:
        return check_directory(v)

    @field_validator("mysqldump", "gzip")
    @classmethod
    def validate_tool(cls, v: Path) -> Path:
        return check_executable(v)

    @field_validator("databases")
    @classmethod
    def validate_databases(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("At least one database name is required")
        return v


def _env_path(env: Mapping[str, str], key: str, check: Callable[[str], Path]) -> Optional[Path]:
    """Read an optional path from the environment, validating it like the CLI flag."""
    name = f"{ENV_PREFIX}_{key}"
    value = env.get(name)
    if not value:
        return None
    try:
        return check(value)
    except ValueError as e:
        raise UsageError(f"{name}: {e}") from e


def _locate_tool(
    explicit: Optional[Path],
    env_value: Optional[Path],
    tool: str,
    which: Callable[[str], Optional[str]],
) -> Path:
    if explicit is not None:
        return explicit
    if env_value is not None:
        return env_value
    found = which(tool)
    if not found:
        raise ToolNotFoundError(tool)
    return Path(found)


def resolve_config(
    options: CliOptions,
    env: Optional[Mapping[str, str]] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
    cwd: Optional[Path] = None,
    hostname: Optional[str] = None,
) -> BackupConfig:
    """Fill unset options with defaults and build a BackupConfig.

    Args:
        options: Parsed command line options
        env: Environment mapping (default: DBBACKUP_* from .env and os.environ)
        which: PATH lookup used for tools that were not given explicitly
        cwd: Default destination (default: current working directory)
        hostname: Host name for artifact names (default: socket.gethostname())

    Raises:
        UsageError: No databases requested, or an environment value is invalid
        ToolNotFoundError: mysqldump or gzip is not given and not on PATH
    """
    if not options.databases:
        raise UsageError("No databases specified; pass at least one database name")

    if env is None:
        env = EnvLoader(prefix=f"{ENV_PREFIX}_").load()

    destination = (
        options.destination
        or _env_path(env, "DESTINATION", check_directory)
        or (cwd or Path.cwd())
    )
    user = options.user if options.user is not None else env.get(f"{ENV_PREFIX}_USER") or DEFAULT_USER
    password = (
        options.password
        if options.password is not None
        else env.get(f"{ENV_PREFIX}_PASSWORD") or DEFAULT_PASSWORD
    )
    mysqldump = _locate_tool(options.mysqldump, _env_path(env, "MYSQLDUMP", check_executable), MYSQLDUMP, which)
    gzip = _locate_tool(options.gzip, _env_path(env, "GZIP", check_executable), GZIP, which)

    values = {
        "destination": destination,
        "user": user,
        "password": password,
        "mysqldump": mysqldump,
        "gzip": gzip,
        "databases": list(options.databases),
    }
    if hostname is not None:
        values["hostname"] = hostname

    try:
        return BackupConfig(**values)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise UsageError(f"Invalid configuration: {messages}") from e
