# src/docgrep/utils/logging.py
from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "docgrep"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a stderr handler on first use.

    Module loggers (``logging.getLogger(__name__)``) propagate here, so the
    CLI only has to set the level once. Output never goes to stdout, which is
    reserved for search results.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
