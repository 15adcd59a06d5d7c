"""Tests for logging setup."""

import logging

from posts_api.core.logging import HANDLER_NAME, configure_logging


def test_configure_logging_adds_one_named_handler():
    configure_logging("DEBUG")
    logger = configure_logging("INFO")
    named = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert logger.level == logging.INFO
