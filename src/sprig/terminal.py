"""Raw terminal handling."""

import sys
import termios
import tty
from types import TracebackType
from typing import Optional, TextIO

from sprig.errors import TerminalError
from sprig.keys import read_key
from sprig.logger import get_logger, mute_console, unmute_console

logger = get_logger("terminal")

CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE = "\x1b[K"
HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class Terminal:
    """Exclusive raw-mode ownership of the controlling terminal.

    Use as a context manager. Entering switches stdin to raw mode, hides the
    cursor and clears the screen once. Leaving restores everything, whether
    the block ended normally or with an exception.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._saved: Optional[list] = None

    def __enter__(self) -> "Terminal":
        if not self.stdin.isatty():
            raise TerminalError("sprig needs an interactive terminal")
        fd = self.stdin.fileno()
        try:
            self._saved = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as err:
            raise TerminalError(f"Failed to enter raw mode: {err}") from err
        logger.debug("Entered raw mode")
        # Console logs would draw over the picker
        mute_console()
        self.write(HIDE_CURSOR + CLEAR_SCREEN)
        self.flush()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.release()

    def release(self, clear: bool = False) -> None:
        """Give the terminal back: cooked mode and a visible cursor.

        Safe to call more than once.

        Args:
            clear: Also wipe the screen, so a following command starts clean
        """
        if self._saved is None:
            return
        self.write((CLEAR_SCREEN + HOME if clear else "") + SHOW_CURSOR)
        self.flush()
        termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved)
        self._saved = None
        unmute_console()
        logger.debug("Left raw mode")

    def home(self) -> None:
        self.write(HOME)

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()

    def read_key(self) -> str:
        """Block for the next key press.

        Raises:
            TerminalError: If input was closed
        """
        key = read_key(self.stdin.fileno())
        if not key:
            raise TerminalError("Terminal input closed")
        return key
