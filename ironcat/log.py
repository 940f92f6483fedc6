"""Engine-wide and application loggers."""

from __future__ import annotations

import logging
import sys

CORE_LOGGER_NAME = "GoblinEngine"
CLIENT_LOGGER_NAME = "App"
LOG_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


class _StdoutHandler(logging.Handler):
    """Writes to whatever ``sys.stdout`` is at the time of each record."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def _configure(logger: logging.Logger) -> None:
    if not any(isinstance(handler, _StdoutHandler) for handler in logger.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


def init() -> None:
    """Set up the core and client loggers to write to standard output."""
    _configure(core_logger())
    _configure(client_logger())


def core_logger() -> logging.Logger:
    """The logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger used by the game built on the engine."""
    return logging.getLogger(CLIENT_LOGGER_NAME)