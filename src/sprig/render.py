"""Drawing the branch list and help panel."""

import shlex

from sprig.git import GIT, Branch, DeleteMode, checkout_args, delete_args
from sprig.terminal import CLEAR_LINE

BRANCHES_HEADER = "Branches:"
HELP_HEADER = "Keys:"
SELECTED_MARKER = "-> "
UNSELECTED_MARKER = "   "
MARGIN = "  "
KEYS_WIDTH = 16
EOL = CLEAR_LINE + "\r\n"


def _command(args: list[str]) -> str:
    return shlex.join([GIT, *args])


def render_branches(branches: list[Branch], index: int, max_name_len: int) -> str:
    """Render the branch list with the cursor on ``branches[index]``.

    Every row ends by clearing to end of line, so a shorter status never
    leaves characters from a longer one behind.
    """
    lines = [BRANCHES_HEADER + EOL]
    for position, branch in enumerate(branches):
        marker = SELECTED_MARKER if position == index else UNSELECTED_MARKER
        lines.append(f"{marker}{branch.name.ljust(max_name_len)}{MARGIN}{branch.status}{EOL}")
    return "".join(lines)


def render_help(branch: Branch, max_name_len: int) -> str:
    """Render key bindings, with the command each would run on ``branch``.

    Commands start in the same column as the statuses in the branch list,
    unless the names are too short to leave room for the key labels.
    """
    width = len(SELECTED_MARKER) + max_name_len
    rows = [
        ("k / Up / C-p", "move up", ""),
        ("j / Down / C-n", "move down", ""),
        ("d / Del", "delete", _command(delete_args(branch.name, DeleteMode.SOFT))),
        ("D", "force delete", _command(delete_args(branch.name, DeleteMode.FORCED))),
        ("c / Enter", "checkout and exit", _command(checkout_args(branch.name))),
        ("q / Esc / C-c", "quit", ""),
    ]
    labels = [f"{UNSELECTED_MARKER}{keys.ljust(KEYS_WIDTH)}{description}" for keys, description, _ in rows]
    # Short branch names leave less room than the labels need
    width = max(width, *(len(label) for label in labels))
    lines = [EOL, HELP_HEADER + EOL]
    for label, (_, _, command) in zip(labels, rows):
        line = f"{label.ljust(width)}{MARGIN}{command}" if command else label
        lines.append(line + EOL)
    return "".join(lines)
