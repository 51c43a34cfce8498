"""Logging configuration for sprig."""

import logging
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(str, Enum):
    """Levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class _Mute(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return False


_MUTE = _Mute()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"sprig.{name}")


def _console_handlers() -> list[RichHandler]:
    return [handler for handler in logging.getLogger("sprig").handlers if isinstance(handler, RichHandler)]


def mute_console() -> None:
    """Stop console logging while the picker owns the terminal.

    File logging is unaffected.
    """
    for handler in _console_handlers():
        handler.addFilter(_MUTE)


def unmute_console() -> None:
    """Resume console logging."""
    for handler in _console_handlers():
        handler.removeFilter(_MUTE)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure logging for sprig.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to

    Raises:
        ValueError: If level is not one of the above
    """
    level_name = LogLevel(level.upper()).value
    logger = logging.getLogger("sprig")
    logger.setLevel(level_name)
    logger.handlers.clear()

    # The interactive screen owns stdout, so console logs go to stderr
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(level_name)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    logger.propagate = False
