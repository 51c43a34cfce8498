"""Interactive session state."""

from dataclasses import dataclass, field
from enum import Enum

from sprig.git import Branch


@dataclass
class Selection:
    """Cursor over the branch list, clamped to ``[0, max_index]``."""

    max_index: int
    index: int = 0

    def move_up(self) -> None:
        if self.index > 0:
            self.index -= 1

    def move_down(self) -> None:
        if self.index < self.max_index:
            self.index += 1


class State(Enum):
    """Main loop state."""

    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class Session:
    """Everything the main loop mutates."""

    branches: list[Branch]
    max_name_len: int
    selection: Selection = field(init=False)
    state: State = State.RUNNING
    exit_code: int = 0

    def __post_init__(self) -> None:
        if not self.branches:
            raise ValueError("A session needs at least one branch")
        self.selection = Selection(max_index=len(self.branches) - 1)

    @property
    def selected(self) -> Branch:
        """The branch under the cursor."""
        return self.branches[self.selection.index]
