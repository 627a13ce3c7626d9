"""Tests for MechaMind logger setup."""

from __future__ import annotations

import logging

from mechamind.logging_config import setup_logging


def test_setup_logging_is_idempotent() -> None:
    logger = setup_logging("debug")
    setup_logging("warning")

    try:
        assert logger.name == "mechamind"
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False
    finally:
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
