"""Test configuration and fixtures."""

import logging
from pathlib import Path
from typing import Callable, Generator, Mapping, Optional, Sequence

import pytest
from git import Actor, Repo

from sprig.runner import CommandResult


class FakeRunner:
    """Command runner that records calls and replays canned results."""

    def __init__(self) -> None:
        self.runs: list[list[str]] = []
        self.calls: list[list[str]] = []
        self.envs: list[Optional[Mapping[str, str]]] = []
        self.results: dict[tuple[str, ...], CommandResult] = {}
        self.call_status = 0

    def add(self, args: Sequence[str], stdout: str = "", stderr: str = "", success: bool = True) -> None:
        self.results[tuple(args)] = CommandResult(stdout=stdout, stderr=stderr, success=success)

    def run(
        self, program: str, args: Sequence[str], env: Optional[Mapping[str, str]] = None
    ) -> CommandResult:
        self.runs.append([program, *args])
        self.envs.append(env)
        return self.results.get(tuple(args), CommandResult(stdout="", stderr="", success=True))

    def call(
        self, program: str, args: Sequence[str], env: Optional[Mapping[str, str]] = None
    ) -> int:
        self.calls.append([program, *args])
        return self.call_status


class FakeScreen:
    """Terminal stand-in fed with a fixed list of keys."""

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys = list(keys)
        self.output: list[str] = []
        self.homes = 0
        self.released: list[bool] = []

    def home(self) -> None:
        self.homes += 1

    def write(self, text: str) -> None:
        self.output.append(text)

    def flush(self) -> None:
        pass

    def read_key(self) -> str:
        return self.keys.pop(0)

    def release(self, clear: bool = False) -> None:
        self.released.append(clear)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner whose listing returns main, feature/a and feature/b."""
    runner = FakeRunner()
    runner.add(["branch", "--list", "--color=never"], stdout="* main\n  feature/a\n  feature/b\n")
    return runner


@pytest.fixture
def make_screen() -> Callable[..., FakeScreen]:
    """Build a fake screen that will report the given keys in order."""
    return lambda *keys: FakeScreen(keys)


@pytest.fixture
def test_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a repository with main, a merged and an unmerged branch.

    main is checked out.
    """
    local_repo = Repo.init(tmp_path)

    author = Actor("Test User", "test@example.com")
    local_repo.config_writer().set_value("user", "name", author.name).release()
    local_repo.config_writer().set_value("user", "email", author.email).release()

    readme = tmp_path / "README.md"
    readme.write_text("# Test Repository")
    local_repo.index.add(["README.md"])
    local_repo.index.commit("Initial commit", author=author, committer=author)

    # Ensure we're on main branch whatever init.defaultBranch says
    if "main" not in local_repo.heads:
        local_repo.create_head("main")
    main_branch = local_repo.heads.main
    main_branch.checkout()
    for head in list(local_repo.heads):
        if head.name != "main":
            local_repo.delete_head(head, force=True)

    # Merged: points at main's commit
    local_repo.create_head("feature/merged")

    # Unmerged: one commit main does not have
    unmerged = local_repo.create_head("feature/unmerged")
    unmerged.checkout()
    extra = tmp_path / "extra.txt"
    extra.write_text("Unmerged content")
    local_repo.index.add(["extra.txt"])
    local_repo.index.commit("Add extra", author=author, committer=author)
    main_branch.checkout()

    yield tmp_path


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers a test or CLI run installed on the sprig logger."""
    yield
    logger = logging.getLogger("sprig")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
