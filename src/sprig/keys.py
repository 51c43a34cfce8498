"""Reading keys and mapping them to actions."""

import os
import select
from enum import Enum

ESC = "\x1b"
CTRL_C = "\x03"
CTRL_N = "\x0e"
CTRL_P = "\x10"
ENTER = "\r"
NEWLINE = "\n"
UP = "\x1b[A"
DOWN = "\x1b[B"
UP_APP = "\x1bOA"
DOWN_APP = "\x1bOB"
DELETE = "\x1b[3~"

# How long to wait for the rest of an escape sequence before treating
# ESC as a key of its own.
ESCAPE_TIMEOUT = 0.05


class Action(Enum):
    """What a key press asks the main loop to do."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    DELETE = "delete"
    FORCE_DELETE = "force_delete"
    CHECKOUT = "checkout"
    QUIT = "quit"
    NONE = "none"


KEY_BINDINGS: dict[str, Action] = {
    DOWN: Action.MOVE_DOWN,
    DOWN_APP: Action.MOVE_DOWN,
    "j": Action.MOVE_DOWN,
    CTRL_N: Action.MOVE_DOWN,
    UP: Action.MOVE_UP,
    UP_APP: Action.MOVE_UP,
    "k": Action.MOVE_UP,
    CTRL_P: Action.MOVE_UP,
    "d": Action.DELETE,
    DELETE: Action.DELETE,
    "D": Action.FORCE_DELETE,
    "c": Action.CHECKOUT,
    ENTER: Action.CHECKOUT,
    NEWLINE: Action.CHECKOUT,
    "q": Action.QUIT,
    ESC: Action.QUIT,
    CTRL_C: Action.QUIT,
}


def key_to_action(key: str) -> Action:
    """Map a key to its action, ``Action.NONE`` if unbound."""
    return KEY_BINDINGS.get(key, Action.NONE)


def _ready(fd: int, timeout: float) -> bool:
    readable, _, _ = select.select([fd], [], [], timeout)
    return bool(readable)


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def read_key(fd: int) -> str:
    """Block until one key is pressed and return it.

    Escape sequences (arrows, Delete) come back whole, e.g. ``"\\x1b[A"``.
    A lone ESC is returned as ``"\\x1b"``. Returns ``""`` at end of input.
    """
    first = os.read(fd, 1)
    if not first:
        return ""
    if first != ESC.encode():
        data = first
        for _ in range(_utf8_length(first[0]) - 1):
            data += os.read(fd, 1)
        return data.decode("utf-8", errors="replace")

    if not _ready(fd, ESCAPE_TIMEOUT):
        return ESC
    intro = os.read(fd, 1).decode("utf-8", errors="replace")
    if intro not in ("[", "O"):
        return ESC + intro
    sequence = ESC + intro
    # CSI parameters run until a final byte in the @..~ range
    while _ready(fd, ESCAPE_TIMEOUT):
        char = os.read(fd, 1).decode("utf-8", errors="replace")
        sequence += char
        if "@" <= char <= "~":
            break
    return sequence
