"""Command line interface for mysql-backup.

USAGE:
    mysql-backup [-d DIR] [-u USER] [-p PASSWORD] [-m MYSQLDUMP] [-g GZIP] DATABASE [DATABASE ...]

Each database is dumped with mysqldump and compressed with gzip -9 into
<DIR>/<hostname>-<database>-<timestamp>.sql.gz.

EXIT STATUS:
    0   every database was backed up
    1   usage or configuration error, nothing was backed up
    99  the run completed but one or more databases failed
"""

import argparse
import sys
from pathlib import Path
from typing import List, Mapping, NoReturn, Optional, Sequence, Tuple

from dbbackup.backup import EXIT_OK, EXIT_USAGE, BackupService, CommandRunner, report
from dbbackup.config import (
    ENV_PREFIX,
    CliOptions,
    EnvLoader,
    check_directory,
    check_executable,
    resolve_config,
)
from dbbackup.exceptions import DbBackupError, UsageError
from dbbackup.logger import get_logger

HELP_FLAGS = frozenset({"--help", "--usage"})

# Flags that take a value, mapped to their long spelling
VALUE_FLAGS = {
    "-d": "--destination",
    "--destination": "--destination",
    "-u": "--user",
    "--user": "--user",
    "-p": "--password",
    "--password": "--password",
    "-m": "--mysqldump",
    "--mysqldump": "--mysqldump",
    "-g": "--gzip",
    "--gzip": "--gzip",
}


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _directory(value: str) -> Path:
    try:
        return check_directory(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _executable(value: str) -> Path:
    try:
        return check_executable(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="mysql-backup",
        description="Back up MySQL databases with mysqldump and gzip.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
        epilog="""
EXIT STATUS:
  0   every database was backed up
  1   usage or configuration error
  99  completed, but one or more databases failed

ENVIRONMENT:
  DBBACKUP_DESTINATION, DBBACKUP_USER, DBBACKUP_PASSWORD,
  DBBACKUP_MYSQLDUMP, DBBACKUP_GZIP supply defaults for the flags above
  (also read from ./.env). DBBACKUP_LOG_LEVEL, DBBACKUP_LOG_FILE and
  DBBACKUP_LOG_JSON configure logging.

NOTE:
  The password is passed to mysqldump on its command line and is visible
  to other users of this host while the dump runs.
        """,
    )
    parser.add_argument(
        "-d", "--destination",
        type=_directory,
        help="Existing directory for backup files. Default: current directory",
    )
    parser.add_argument(
        "-u", "--user",
        help="Database user. Default: root",
    )
    parser.add_argument(
        "-p", "--password",
        help="Database password. Default: empty",
    )
    parser.add_argument(
        "-m", "--mysqldump",
        type=_executable,
        help="Path to the mysqldump executable. Default: found on PATH",
    )
    parser.add_argument(
        "-g", "--gzip",
        type=_executable,
        help="Path to the gzip executable. Default: found on PATH",
    )
    parser.add_argument(
        "--help", "--usage",
        action="store_true",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "databases",
        nargs="*",
        metavar="DATABASE",
        help="Database to back up; may be repeated",
    )
    return parser


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate flags from database names, keeping command line order.

    A value flag always takes the next token as its value, even one that
    starts with a dash, and is rewritten to "--flag=value" so argparse cannot
    mistake the value for an option. Every token that is not a flag is a
    database name.

    Returns:
        (flags for argparse, database names)
    """
    flags: List[str] = []
    databases: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token in HELP_FLAGS:
            flags.append(token)
        elif token in VALUE_FLAGS:
            value = next(tokens, None)
            # A trailing flag is left bare so argparse reports the missing value
            flags.append(token if value is None else f"{VALUE_FLAGS[token]}={value}")
        elif token.split("=", 1)[0] in VALUE_FLAGS or (
            not token.startswith("--") and token[:2] in VALUE_FLAGS
        ):
            # --user=backup or -ubackup
            flags.append(token)
        else:
            databases.append(token)
    return flags, databases


def parse_args(argv: Sequence[str], parser: Optional[argparse.ArgumentParser] = None) -> CliOptions:
    """Parse command line arguments into CliOptions.

    Tokens that are not recognised flags are database names, including ones
    that start with a dash.

    Raises:
        UsageError: A flag value is missing or invalid
    """
    parser = parser or build_parser()
    flags, databases = split_argv(argv)
    namespace = parser.parse_args(flags)
    return CliOptions(
        databases=databases,
        destination=namespace.destination,
        user=namespace.user,
        password=namespace.password,
        mysqldump=namespace.mysqldump,
        gzip=namespace.gzip,
    )


def main(
    argv: Optional[Sequence[str]] = None,
    runner: Optional[CommandRunner] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run mysql-backup and return the process exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    if any(arg in HELP_FLAGS for arg in argv):
        parser.print_help()
        return EXIT_OK

    env_data = EnvLoader(prefix=f"{ENV_PREFIX}_").load() if env is None else env
    logger = get_logger(env=env_data)

    try:
        options = parse_args(argv, parser)
        config = resolve_config(options, env=env_data)
    except DbBackupError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_USAGE

    outcomes = BackupService(config, runner=runner, logger=logger).run()
    return report(outcomes, logger=logger)


if __name__ == "__main__":
    sys.exit(main())
