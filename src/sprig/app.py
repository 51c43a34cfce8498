"""The interactive main loop."""

from typing import Protocol

from sprig.git import BranchRepo, DeleteMode
from sprig.keys import Action, key_to_action
from sprig.logger import get_logger
from sprig.render import render_branches, render_help
from sprig.session import Session, State

logger = get_logger("app")


class Screen(Protocol):
    """The parts of a terminal the main loop uses."""

    def home(self) -> None: ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def read_key(self) -> str: ...

    def release(self, clear: bool = False) -> None: ...


def draw(session: Session, screen: Screen) -> None:
    """Redraw the whole interface over the previous frame."""
    screen.home()
    screen.write(render_branches(session.branches, session.selection.index, session.max_name_len))
    screen.write(render_help(session.selected, session.max_name_len))
    screen.flush()


def dispatch(session: Session, action: Action, repo: BranchRepo, screen: Screen) -> None:
    """Apply one action to the session."""
    if action is Action.MOVE_UP:
        session.selection.move_up()
    elif action is Action.MOVE_DOWN:
        session.selection.move_down()
    elif action is Action.DELETE:
        repo.delete(session.selected, DeleteMode.SOFT)
    elif action is Action.FORCE_DELETE:
        repo.delete(session.selected, DeleteMode.FORCED)
    elif action is Action.QUIT:
        session.state = State.TERMINATED
    elif action is Action.CHECKOUT:
        # git checkout prints its own progress, so it gets the terminal for good
        screen.release(clear=True)
        session.state = State.TERMINATED
        session.exit_code = repo.checkout(session.selected)


def run(session: Session, repo: BranchRepo, screen: Screen) -> int:
    """Run the loop until quit or checkout.

    Returns:
        The exit code the process should end with
    """
    while session.state is State.RUNNING:
        draw(session, screen)
        key = screen.read_key()
        action = key_to_action(key)
        logger.debug("Key %r -> %s", key, action.name)
        dispatch(session, action, repo, screen)
    return session.exit_code
