"""Git branch operations."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from sprig.errors import GitError
from sprig.logger import get_logger
from sprig.runner import CommandResult, CommandRunner

logger = get_logger("git")

GIT = "git"
CURRENT_MARKER = "* "
CURRENT_STATUS = "(current branch)"

# Listing and deletion ignore the user's system and global configuration so
# branch order does not depend on settings such as branch.sort.
ISOLATED_ENV: Mapping[str, str] = {
    "GIT_CONFIG_NOSYSTEM": "1",
    "GIT_CONFIG_GLOBAL": os.devnull,
}


class DeleteMode(Enum):
    """How hard to try deleting a branch."""

    SOFT = "-d"
    FORCED = "-D"


def list_args() -> list[str]:
    """Arguments for the plain local branch listing."""
    return ["branch", "--list", "--color=never"]


def delete_args(name: str, mode: DeleteMode) -> list[str]:
    """Arguments for deleting a branch."""
    return ["branch", mode.value, name]


def checkout_args(name: str) -> list[str]:
    """Arguments for checking out a branch."""
    return ["checkout", "--progress", name]


@dataclass
class Branch:
    """A local branch and the result of the last action taken on it."""

    name: str
    status: str = ""
    current: bool = False

    @classmethod
    def parse(cls, line: str) -> "Branch":
        """Parse one line of ``git branch --list`` output.

        The first two characters are the marker, the rest is the name.
        """
        current = line.startswith(CURRENT_MARKER)
        return cls(name=line[2:], status=CURRENT_STATUS if current else "", current=current)

    def record(self, result: CommandResult) -> None:
        """Show a command's output as this branch's status, on one line."""
        self.status = result.combined.replace("\n", " ")


def open_worktree(path: Path) -> Path:
    """Find the work tree containing ``path``.

    Raises:
        GitError: If path is not inside a non-bare git repository
    """
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as err:
        raise GitError(f"Failed to open repository: {path}") from err
    if repo.bare or repo.working_tree_dir is None:
        raise GitError("Cannot operate on bare repository")
    return Path(repo.working_tree_dir)


class BranchRepo:
    """Local branches of one repository, acted on through a command runner."""

    def __init__(self, runner: CommandRunner, isolated: bool = True) -> None:
        """Initialize repository.

        Args:
            runner: Runs git
            isolated: Suppress the user's system and global git configuration
                when listing and deleting
        """
        self.runner = runner
        self.env: Optional[Mapping[str, str]] = ISOLATED_ENV if isolated else None

    def load(self) -> tuple[list[Branch], int]:
        """List local branches.

        Returns:
            The branches in listing order and the length of the longest name
            (0 when there are none).

        Raises:
            CommandError: If git could not be started
        """
        result = self.runner.run(GIT, list_args(), self.env)
        if not result.success:
            logger.warning("Branch listing failed: %s", result.stderr.strip())
        branches = [Branch.parse(line) for line in result.stdout.splitlines() if line]
        max_name_len = max((len(branch.name) for branch in branches), default=0)
        return branches, max_name_len

    def delete(self, branch: Branch, mode: DeleteMode) -> CommandResult:
        """Delete a branch and record the outcome in its status.

        The branch object is kept either way; only its status changes.
        """
        result = self.runner.run(GIT, delete_args(branch.name, mode), self.env)
        if not result.success:
            logger.info("Could not delete %s: %s", branch.name, result.stderr.strip())
        branch.record(result)
        return result

    def checkout(self, branch: Branch) -> int:
        """Check out a branch, giving git the terminal.

        The caller must have released the terminal first.

        Raises:
            CommandError: If git could not be started
        """
        return self.runner.call(GIT, checkout_args(branch.name))
