"""Unit tests for logs.py"""

import logging

from docedit.logs import configure_logging


def test_configure_logging_sets_level_and_single_handler():
    logger = configure_logging("DEBUG")
    configure_logging("INFO")
    assert logger is logging.getLogger("docedit")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
