"""Unit tests for logging configuration."""

import logging

from sidediff.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_creates_handler(self):
        """setup_logging attaches a handler to the sidediff logger."""
        logger = logging.getLogger("sidediff")
        initial_handlers = len(logger.handlers)

        setup_logging()

        assert len(logger.handlers) > initial_handlers

        while len(logger.handlers) > initial_handlers:
            logger.handlers.pop()

    def test_setup_logging_with_custom_level(self):
        """setup_logging respects custom log level."""
        logger = logging.getLogger("sidediff")
        initial_handlers = len(logger.handlers)

        setup_logging(level=logging.DEBUG)

        assert logger.level == logging.DEBUG

        while len(logger.handlers) > initial_handlers:
            logger.handlers.pop()
        logger.setLevel(logging.WARNING)

    def test_logger_propagate_is_false(self):
        """Records do not reach the root logger twice."""
        logger = logging.getLogger("sidediff")
        initial_handlers = len(logger.handlers)

        setup_logging()

        assert logger.propagate is False

        while len(logger.handlers) > initial_handlers:
            logger.handlers.pop()
        logger.propagate = True

    def test_setup_logging_formatter(self):
        """setup_logging configures formatter with timestamp and level."""
        logger = logging.getLogger("sidediff")
        initial_handlers = len(logger.handlers)

        setup_logging()

        formatter = logger.handlers[-1].formatter
        assert formatter is not None
        assert "%(asctime)s" in formatter._fmt
        assert "%(levelname)s" in formatter._fmt

        while len(logger.handlers) > initial_handlers:
            logger.handlers.pop()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger_instance(self):
        assert isinstance(get_logger("sidediff.render"), logging.Logger)

    def test_get_logger_uses_provided_name(self):
        assert get_logger("sidediff.diff.parser").name == "sidediff.diff.parser"

    def test_get_logger_same_name_returns_same_logger(self):
        assert get_logger("sidediff.config") is get_logger("sidediff.config")
