"""
Tests for the colored Logger wrapper.
"""

import logging
from unittest.mock import patch

from deferred_callbacks.utils.logging import Logger


class TestLogger:
    """Test cases for Logger."""

    def test_attaches_single_handler(self):
        Logger("test_logging.single", "registry")
        logger = Logger("test_logging.single", "registry").get_logger()

        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_sets_level(self):
        logger = Logger("test_logging.level", "registry", "debug")

        assert logger.get_logger().level == logging.DEBUG

        logger.set_level("error")
        assert logger.get_logger().level == logging.ERROR

    def test_error_includes_traceback_and_class_name(self):
        logger = Logger("test_logging.error", "sink")
        try:
            raise ValueError("broken")
        except ValueError as e:
            error = e

        with patch.object(logger.get_logger(), "handle") as handle:
            logger.error("callback failed", exc_info=error)

        record = handle.call_args.args[0]
        assert record.levelno == logging.ERROR
        assert record.class_name == "test_logging.error"
        assert "callback failed" in record.getMessage()
        assert "ValueError: broken" in record.getMessage()

    def test_debug_suppressed_below_level(self):
        logger = Logger("test_logging.quiet", "registry", "info")

        with patch.object(logger.get_logger(), "handle") as handle:
            logger.debug("hidden")

        handle.assert_not_called()

    def test_existing_logger_keeps_its_level(self):
        first = Logger("test_logging.kept", "registry", "info")
        first.set_level("debug")

        Logger("test_logging.kept", "registry", "info")

        assert first.get_logger().level == logging.DEBUG

    def test_warning_is_emitted_with_class_name(self):
        logger = Logger("test_logging.warning", "registry")

        with patch.object(logger.get_logger(), "handle") as handle:
            logger.warning("cached fulfillment replaced")

        record = handle.call_args.args[0]
        assert record.levelno == logging.WARNING
        assert record.class_name == "test_logging.warning"
        assert record.getMessage() == "cached fulfillment replaced"
