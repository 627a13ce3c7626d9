"""Logging setup for MechaMind entry points.

Library modules only create loggers under the ``mechamind`` namespace; the
CLI (or an embedding application) calls ``setup_logging`` once.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "mechamind"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``mechamind`` logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
