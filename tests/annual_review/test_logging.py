"""Tests for logging setup."""
import logging
import sys

from src.annual_review.logging import configure_logging, get_logger


def test_configure_logging_sets_level_and_stdout_handler(restore_root_logger):
    configure_logging("debug")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.handlers[0].stream is sys.stdout


def test_get_logger_uses_root_handlers_once_configured(restore_root_logger):
    configure_logging("INFO")

    logger = get_logger("annual_review.tests.configured")

    assert logger.handlers == []


def test_get_logger_falls_back_to_stdout(restore_root_logger):
    # Arrange
    restore_root_logger.handlers[:] = []
    name = "annual_review.tests.unconfigured"

    # Act
    logger = get_logger(name)

    # Assert
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
