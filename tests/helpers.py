"""Test doubles shared by the dbbackup test modules."""

import stat
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple

from dbbackup.backup import CommandResult, CommandRunner

# Stand-ins for the real tools: mysqldump writes one line naming the database
# (and fails for the database called "broken"), gzip renames FILE to FILE.gz.
FAKE_MYSQLDUMP = """#!/bin/sh
for last; do :; done
if [ "$last" = "broken" ]; then
    echo "mysqldump: Got error: 1049: Unknown database 'broken' when selecting the database" >&2
    exit 2
fi
echo "-- MySQL dump of $last"
"""

FAKE_GZIP = """#!/bin/sh
for last; do :; done
mv "$last" "$last.gz"
"""


def make_executable(path: Path, content: str = "#!/bin/sh\nexit 0\n") -> Path:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


class FakeRunner(CommandRunner):
    """In-process CommandRunner that imitates mysqldump and gzip.

    Args:
        failing_dumps: Databases whose dump exits non-zero
        failing_compress: If True, every gzip call exits non-zero after
            leaving a partial .gz file behind
        missing_artifact: If True, gzip exits 0 without writing the .gz file
    """

    def __init__(
        self,
        failing_dumps: Optional[Set[str]] = None,
        failing_compress: bool = False,
        missing_artifact: bool = False,
    ):
        self.failing_dumps = failing_dumps or set()
        self.failing_compress = failing_compress
        self.missing_artifact = missing_artifact
        self.calls: List[Tuple[List[str], Optional[Path]]] = []

    def run(self, args: Sequence[str], stdout_path: Optional[Path] = None) -> CommandResult:
        argv = [str(a) for a in args]
        self.calls.append((argv, stdout_path))

        if stdout_path is not None:
            database = argv[-1]
            stdout_path.write_text(f"-- partial dump of {database}\n")
            if database in self.failing_dumps:
                return CommandResult(args=argv, return_code=2, stderr=f"Unknown database '{database}'\n")
            stdout_path.write_text(f"-- MySQL dump of {database}\n")
            return CommandResult(args=argv, return_code=0)

        target = Path(argv[-1])
        if self.missing_artifact:
            target.unlink()
            return CommandResult(args=argv, return_code=0)
        compressed = target.with_name(target.name + ".gz")
        compressed.write_bytes(b"\x1f\x8b partial")
        if self.failing_compress:
            return CommandResult(args=argv, return_code=1, stderr="gzip: No space left on device\n")
        target.unlink()
        return CommandResult(args=argv, return_code=0)

    @property
    def dump_calls(self) -> List[List[str]]:
        return [argv for argv, stdout_path in self.calls if stdout_path is not None]

    @property
    def compress_calls(self) -> List[List[str]]:
        return [argv for argv, stdout_path in self.calls if stdout_path is None]
