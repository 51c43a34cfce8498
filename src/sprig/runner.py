"""Running external commands."""

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence

from git import Git, GitCommandNotFound

from sprig.errors import CommandError
from sprig.logger import get_logger

logger = get_logger("runner")


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished command."""

    stdout: str
    stderr: str
    success: bool

    @property
    def combined(self) -> str:
        """Stderr followed by stdout."""
        return self.stderr + self.stdout


class CommandRunner(Protocol):
    """Anything that can run a program synchronously."""

    def run(
        self, program: str, args: Sequence[str], env: Optional[Mapping[str, str]] = None
    ) -> CommandResult:
        """Run a program and capture its output."""
        ...

    def call(
        self, program: str, args: Sequence[str], env: Optional[Mapping[str, str]] = None
    ) -> int:
        """Run a program attached to the current terminal and return its exit status."""
        ...


class GitCommandRunner:
    """Command runner backed by GitPython, rooted in a work tree."""

    def __init__(self, path: Path) -> None:
        """Initialize runner.

        Args:
            path: Directory every command runs in
        """
        self.path = path
        self.git = Git(str(path))

    def run(
        self, program: str, args: Sequence[str], env: Optional[Mapping[str, str]] = None
    ) -> CommandResult:
        """Run a program and capture stdout, stderr and success.

        A non-zero exit is reported through ``success``, never raised.

        Raises:
            CommandError: If the program could not be started
        """
        command = [program, *args]
        logger.debug("Running %s (env overrides: %s)", command, dict(env or {}))
        try:
            status, stdout, stderr = self.git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                strip_newline_in_stdout=False,
                env=dict(env) if env else None,
            )
        except GitCommandNotFound as err:
            raise CommandError(command, str(err)) from err
        logger.debug("%s exited with %s", command, status)
        return CommandResult(stdout=stdout, stderr=stderr, success=status == 0)

    def call(
        self, program: str, args: Sequence[str], env: Optional[Mapping[str, str]] = None
    ) -> int:
        """Run a program with inherited stdin, stdout and stderr.

        Returns:
            The exit status as a shell reports it: 128 + N if killed by signal N

        Raises:
            CommandError: If the program could not be started
        """
        command = [program, *args]
        logger.debug("Handing terminal to %s", command)
        try:
            completed = subprocess.run(command, cwd=self.path, env={**os.environ, **(env or {})})
        except OSError as err:
            raise CommandError(command, str(err)) from err
        if completed.returncode < 0:
            return 128 - completed.returncode
        return completed.returncode
