"""Tests for end-of-run reporting"""

import io
from pathlib import Path

from dbbackup.backup import EXIT_OK, EXIT_PARTIAL_FAILURE, EXIT_USAGE, BackupOutcome, report


def test_exit_codes_are_distinct():
    assert len({EXIT_OK, EXIT_USAGE, EXIT_PARTIAL_FAILURE}) == 3
    assert EXIT_PARTIAL_FAILURE == 99


def test_all_success_returns_zero_and_prints_nothing():
    output = io.StringIO()
    outcomes = [BackupOutcome(database="shop", success=True, artifact=Path("/tmp/shop.sql.gz"))]

    assert report(outcomes, output=output) == EXIT_OK
    assert output.getvalue() == ""


def test_failures_printed_in_order():
    output = io.StringIO()
    outcomes = [
        BackupOutcome(database="a", success=False, error="Backup of database 'a' failed"),
        BackupOutcome(database="b", success=True),
        BackupOutcome(database="c", success=False, error="Backup of database 'c' failed"),
    ]

    assert report(outcomes, output=output) == EXIT_PARTIAL_FAILURE
    assert output.getvalue().splitlines() == [
        "ERROR: Backup of database 'a' failed",
        "ERROR: Backup of database 'c' failed",
    ]


def test_empty_run_is_success():
    assert report([], output=io.StringIO()) == EXIT_OK
