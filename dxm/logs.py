"""Console logging for the command line."""

import logging
import sys
from collections.abc import Callable
from typing import TextIO

LOGGER_NAME = "dxm"
TRACE = 5
OFF = logging.CRITICAL + 10


def level_name(level: int) -> str:
    """Short lower-case name printed in front of a message of ``level``."""
    if level >= logging.ERROR:
        return "error"
    if level >= logging.WARNING:
        return "warn"
    if level >= logging.INFO:
        return "info"
    if level >= logging.DEBUG:
        return "debug"
    return "trace"


class _LevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return f"{level_name(record.levelno)}: {record.getMessage()}"


class _ConsoleHandler(logging.Handler):
    """Writes to the stream returned by ``stream`` at emit time."""

    def __init__(self, stream: Callable[[], TextIO]) -> None:
        super().__init__()
        self._stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = self._stream()
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def init_logging() -> logging.Logger:
    """Send info and lower to stdout and warnings and errors to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            logger.removeHandler(handler)

    formatter = _LevelFormatter()

    stdout = _ConsoleHandler(lambda: sys.stdout)
    stdout.addFilter(lambda record: record.levelno < logging.WARNING)
    stdout.setFormatter(formatter)

    stderr = _ConsoleHandler(lambda: sys.stderr)
    stderr.setLevel(logging.WARNING)
    stderr.setFormatter(formatter)

    logger.addHandler(stdout)
    logger.addHandler(stderr)
    return logger