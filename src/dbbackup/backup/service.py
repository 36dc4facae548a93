"""Backup executor.

Backs up each configured database in turn: mysqldump into
``<destination>/<base>.sql``, then ``gzip -9`` in place. A failed database is
recorded and the run moves on; there are no retries.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from dbbackup.backup.models import BackupOutcome
from dbbackup.backup.naming import COMPRESSED_SUFFIX, DUMP_SUFFIX, unique_basename
from dbbackup.backup.runner import CommandRunner, SubprocessRunner, redact_args
from dbbackup.config import BackupConfig
from dbbackup.exceptions import BackupError
from dbbackup.logger import Logger, get_logger

GZIP_LEVEL = "-9"


def build_dump_command(config: BackupConfig, database: str) -> List[str]:
    """mysqldump argument list for one database.

    The password travels on the command line and is visible to other
    processes on the host while mysqldump runs.
    """
    return [
        str(config.mysqldump),
        "--routines",
        "--comments",
        f"--user={config.user}",
        f"--password={config.password}",
        database,
    ]


def build_compress_command(config: BackupConfig, dump_path: Path) -> List[str]:
    """gzip argument list that replaces ``dump_path`` with ``dump_path.gz``."""
    return [str(config.gzip), GZIP_LEVEL, str(dump_path)]


class BackupService:
    """Runs one backup per requested database"""

    def __init__(
        self,
        config: BackupConfig,
        runner: Optional[CommandRunner] = None,
        logger: Optional[Logger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.runner = runner or SubprocessRunner()
        self.logger = logger or get_logger()
        self.clock = clock

    def run(self) -> List[BackupOutcome]:
        """Back up every configured database, in order.

        Returns:
            One outcome per requested database, in request order
        """
        self.logger.info(
            "Backup run started",
            databases=len(self.config.databases),
            destination=str(self.config.destination),
        )
        return [self.backup_database(database) for database in self.config.databases]

    def backup_database(self, database: str) -> BackupOutcome:
        """Dump and compress a single database.

        Failures are returned as an unsuccessful outcome, never raised.
        """
        base = unique_basename(self.config.destination, self.config.hostname, database, self.clock())
        dump_path = self.config.destination / f"{base}{DUMP_SUFFIX}"
        artifact = self.config.destination / f"{base}{COMPRESSED_SUFFIX}"

        self.logger.info("Backing up database", database=database, artifact=artifact.name)

        try:
            self._dump(database, dump_path)
            self._compress(database, dump_path, artifact)
        except BackupError as e:
            self._discard(dump_path, artifact)
            self.logger.error("Backup failed", database=database, reason=e.message)
            return BackupOutcome(database=database, success=False, error=e.message)

        size_bytes = artifact.stat().st_size
        self.logger.info("Backup written", database=database, artifact=str(artifact), size_bytes=size_bytes)
        return BackupOutcome(database=database, success=True, artifact=artifact)

    def _dump(self, database: str, dump_path: Path) -> None:
        args = build_dump_command(self.config, database)
        self.logger.debug("Running dump", command=" ".join(redact_args(args)))
        result = self.runner.run(args, stdout_path=dump_path)
        if not result.success:
            raise BackupError(
                database,
                f"Backup of database '{database}' failed: "
                f"{self.config.mysqldump.name} {result.describe_failure()}",
                details={"return_code": result.return_code},
            )

    def _compress(self, database: str, dump_path: Path, artifact: Path) -> None:
        args = build_compress_command(self.config, dump_path)
        self.logger.debug("Running compression", command=" ".join(args))
        result = self.runner.run(args)
        if not result.success:
            raise BackupError(
                database,
                f"Compression of backup for database '{database}' failed: "
                f"{self.config.gzip.name} {result.describe_failure()}",
                details={"return_code": result.return_code},
            )
        if not artifact.is_file():
            raise BackupError(
                database,
                f"Compression of backup for database '{database}' failed: "
                f"{self.config.gzip.name} exited 0 but {artifact.name} was not created",
                details={"artifact": str(artifact)},
            )

    def _discard(self, *paths: Path) -> None:
        """Remove partial artifacts left by a failed backup."""
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                self.logger.warning("Could not remove partial backup", path=str(path), error=str(e))
