"""
measura.logging_utils
=====================

One place to configure the ``measura`` logger.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached here, once, by whoever runs the program (the CLI does).
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "measura"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _own_handler(logger: logging.Logger) -> Optional[logging.StreamHandler]:
    for handler in logger.handlers:
        if getattr(handler, "_measura_handler", False):
            return handler
    return None


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a timestamped stream handler to the ``measura`` logger.

    Calling it again updates the level and the stream of the existing
    handler; no duplicate handlers are added.

    Parameters
    ----------
    level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL".
    stream : file-like, optional
        Destination of log records; the current ``sys.stderr`` by default.
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric)

    handler = _own_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        handler._measura_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    else:
        handler.setStream(stream or sys.stderr)
    handler.setLevel(numeric)

    logger.debug("Logging configured at %s", level.upper())
    return logger


__all__ = ["LOGGER_NAME", "setup_logging"]
