"""External command execution.

Every external process the backup pipeline starts goes through a
CommandRunner, so tests can substitute a fake and the credential exposure of
mysqldump's command line stays in one place.
"""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

__all__ = [
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "redact_args",
]

_SECRET_OPTIONS = ("--password=",)


def redact_args(args: Sequence[str]) -> List[str]:
    """Return a copy of ``args`` safe to log, with password values masked."""
    redacted = []
    for arg in args:
        for option in _SECRET_OPTIONS:
            if arg.startswith(option) and len(arg) > len(option):
                arg = option + "***"
        redacted.append(arg)
    return redacted


@dataclass
class CommandResult:
    """Result of one external command."""

    args: List[str]
    return_code: int
    stderr: str = ""
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.return_code == 0 and self.error_message is None

    def describe_failure(self) -> str:
        """One-line reason suitable for an operator-facing report."""
        if self.error_message:
            return self.error_message
        reason = f"exited with status {self.return_code}"
        detail = self.stderr.strip().splitlines()
        if detail:
            reason += f": {detail[-1]}"
        return reason


class CommandRunner(ABC):
    """Runs an external command to completion."""

    @abstractmethod
    def run(self, args: Sequence[str], stdout_path: Optional[Path] = None) -> CommandResult:
        """Run ``args`` and block until it exits.

        Args:
            args: Program and arguments; no shell is involved
            stdout_path: If given, standard output is written to this file
                (created or truncated before the process starts)

        Returns:
            CommandResult. A process that cannot be started yields a result
            with return_code -1 and error_message set rather than raising.
        """


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by subprocess.run."""

    def run(self, args: Sequence[str], stdout_path: Optional[Path] = None) -> CommandResult:
        argv = [str(a) for a in args]
        try:
            if stdout_path is not None:
                with open(stdout_path, "wb") as out:
                    completed = subprocess.run(
                        argv, stdout=out, stderr=subprocess.PIPE, text=True, errors="replace"
                    )
            else:
                completed = subprocess.run(
                    argv,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.PIPE,
                    text=True,
                    errors="replace",
                )
        except OSError as e:
            return CommandResult(
                args=argv,
                return_code=-1,
                error_message=f"could not run {argv[0]}: {e}",
            )

        return CommandResult(args=argv, return_code=completed.returncode, stderr=completed.stderr or "")
