"""Errors raised by sprig."""


class SprigError(Exception):
    """Base error for sprig."""


class CommandError(SprigError):
    """An external command could not be started."""

    def __init__(self, command: list[str], reason: str) -> None:
        """Initialize error.

        Args:
            command: Full argument vector that was attempted
            reason: Why the command could not be started
        """
        super().__init__(f"Failed to run '{' '.join(command)}': {reason}")
        self.command = command


class GitError(SprigError):
    """Git repository error."""


class TerminalError(SprigError):
    """The terminal could not be put into raw mode."""
