"""Command line interface for sprig."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print

from sprig import __version__
from sprig.app import run
from sprig.errors import CommandError, GitError, TerminalError
from sprig.git import BranchRepo, open_worktree
from sprig.logger import LogLevel, setup_logging
from sprig.runner import GitCommandRunner
from sprig.session import Session
from sprig.terminal import Terminal

app = typer.Typer(help="Interactive git branch picker")


def version_callback(value: bool) -> None:
    if value:
        print(f"sprig {__version__}")
        raise typer.Exit()


def get_repo(path: Path, user_config: bool) -> BranchRepo:
    """Get branch repository for the work tree containing path."""
    try:
        worktree = open_worktree(path)
    except GitError as err:
        print(f"[red]Error:[/red] {err}")
        raise typer.Exit(code=1) from err
    return BranchRepo(GitCommandRunner(worktree), isolated=not user_config)


@app.command()
def main(
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    user_config: Annotated[
        bool,
        typer.Option(
            "--user-config/--isolated-config",
            help="Read your global and system git config when listing and deleting branches",
        ),
    ] = False,
    log_level: Annotated[LogLevel, typer.Option(case_sensitive=False, help="Logging level")] = LogLevel.WARNING,
    log_file: Annotated[Optional[Path], typer.Option(help="Also write logs to this file")] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """Pick a local branch to delete, force delete or check out."""
    setup_logging(log_level.value, str(log_file) if log_file else None)
    repo = get_repo(path, user_config)

    try:
        branches, max_name_len = repo.load()
    except CommandError as err:
        print(f"[red]Error:[/red] {err}")
        raise typer.Exit(code=1) from err
    if not branches:
        print("[yellow]No local branches found[/yellow]")
        raise typer.Exit(code=1)

    session = Session(branches=branches, max_name_len=max_name_len)
    try:
        with Terminal() as terminal:
            exit_code = run(session, repo, terminal)
    except (CommandError, TerminalError) as err:
        print(f"[red]Error:[/red] {err}")
        raise typer.Exit(code=1) from err

    if exit_code:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
