"""End-of-run reporting and exit status."""

import sys
from typing import Optional, Sequence, TextIO

from dbbackup.backup.models import BackupOutcome
from dbbackup.logger import Logger

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PARTIAL_FAILURE = 99


def report(
    outcomes: Sequence[BackupOutcome],
    output: Optional[TextIO] = None,
    logger: Optional[Logger] = None,
) -> int:
    """Print every failure and return the process exit status.

    Returns:
        EXIT_OK if every database was backed up, EXIT_PARTIAL_FAILURE otherwise
    """
    output = output or sys.stdout
    failures = [o for o in outcomes if not o.success]

    if logger is not None:
        logger.info(
            "Backup run finished",
            succeeded=len(outcomes) - len(failures),
            failed=len(failures),
        )

    for outcome in failures:
        print(f"ERROR: {outcome.error}", file=output)

    return EXIT_PARTIAL_FAILURE if failures else EXIT_OK
