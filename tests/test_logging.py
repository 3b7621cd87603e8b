"""
Unit tests for the shared logger factory.
"""

import logging

from gendata.core import DataStore
from gendata.schema import CommentData
from gendata.utils.logging import get_logger


def test_quiet_logger_defaults_to_warning():
    logger = get_logger("gendata.tests.quiet")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_verbose_logger_is_debug():
    assert get_logger("gendata.tests.loud", verbose=True).level == logging.DEBUG


def test_quiet_caller_keeps_earlier_verbose_level():
    """Creating a quiet logger with the same name does not silence a verbose one."""
    loud = get_logger("gendata.tests.shared", verbose=True)
    get_logger("gendata.tests.shared")
    assert loud.level == logging.DEBUG
    assert len(loud.handlers) == 1


def test_second_store_keeps_verbose_output(caplog):
    """A quiet DataStore created later does not drop a verbose store back to WARNING."""
    loud = DataStore(verbose=True)
    DataStore()
    assert loud.logger.level == logging.DEBUG

    with caplog.at_level("DEBUG"):
        loud.attach(CommentData("kept"))
    assert "Attached COMMENT record" in caplog.text
