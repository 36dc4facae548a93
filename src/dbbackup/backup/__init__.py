"""dbbackup backup module

Usage:
    from dbbackup.backup import BackupService, report

    outcomes = BackupService(config).run()
    exit_code = report(outcomes)
"""

from dbbackup.backup.models import BackupOutcome
from dbbackup.backup.naming import backup_basename, unique_basename
from dbbackup.backup.report import EXIT_OK, EXIT_PARTIAL_FAILURE, EXIT_USAGE, report
from dbbackup.backup.runner import CommandResult, CommandRunner, SubprocessRunner, redact_args
from dbbackup.backup.service import BackupService, build_compress_command, build_dump_command

__all__ = [
    "BackupOutcome",
    "BackupService",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "backup_basename",
    "build_compress_command",
    "build_dump_command",
    "redact_args",
    "report",
    "unique_basename",
    "EXIT_OK",
    "EXIT_USAGE",
    "EXIT_PARTIAL_FAILURE",
]
