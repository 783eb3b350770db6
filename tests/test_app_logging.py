"""Tests for logging configuration."""

import logging

from brewlog.app_logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_idempotent(self):
        """Repeated calls attach a single handler."""
        configure_logging()
        logger = configure_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
