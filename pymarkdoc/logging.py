"""Logging utilities for pymarkdoc."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "pymarkdoc"

# -v shows written files and repository fallbacks, -vv every skipped symbol
_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the pymarkdoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def verbosity_level(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level."""
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def configure_logging(
    *, verbosity: int = 0, log_file: Path | None = None
) -> logging.Logger:
    """Send pymarkdoc records to stderr and, optionally, to ``log_file``.

    The file always receives debug records so a quiet run can still be
    diagnosed afterwards.
    """
    level = verbosity_level(verbosity)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_format = "[pymarkdoc] %(levelname)s %(message)s"
    if level == logging.DEBUG:
        console_format = "[pymarkdoc] %(levelname)s %(name)s: %(message)s"
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(console_format))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger", "verbosity_level"]
