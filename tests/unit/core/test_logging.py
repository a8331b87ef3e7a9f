"""
Tests for lexdesk/core/logging.py
"""

from unittest.mock import patch


class TestLogger:
    """Tests for the logging module."""

    def test_get_logger_returns_logger(self):
        """Test that get_logger returns a logger instance."""
        from lexdesk.core.logging import get_logger

        assert get_logger("test_module") is not None

    def test_logger_accepts_structured_fields(self):
        """Test that loggers take keyword fields."""
        from lexdesk.core.logging import get_logger

        logger = get_logger("test_extra")
        logger.info("Ranked documents", candidates=3, returned=1)
        logger.warning("Answer generation failed", error="timeout")

    def test_setup_logging_json(self):
        """Test configuring production logging."""
        from lexdesk.core import logging as module

        with patch.object(module.settings, "DEBUG", False):
            module.setup_logging()

        module.get_logger("after_setup").info("Configured")

    def test_setup_logging_console(self):
        """Test configuring development logging."""
        from lexdesk.core import logging as module

        with patch.object(module.settings, "DEBUG", True):
            module.setup_logging()


class TestLoggerMixin:
    """Tests for LoggerMixin."""

    def test_mixin_provides_logger(self):
        """Test that classes using the mixin get a logger."""
        from lexdesk.retrieval import LexicalRanker

        assert LexicalRanker().logger is not None


class TestLogContext:
    """Tests for binding values to the log context."""

    def test_bind_and_unbind(self):
        """Test that bound values appear in the contextvars and can be removed."""
        import structlog
        from lexdesk.core.logging import bind_log_context, unbind_log_context

        bind_log_context(query_id="q-1")
        assert structlog.contextvars.get_contextvars()["query_id"] == "q-1"

        unbind_log_context("query_id")
        assert "query_id" not in structlog.contextvars.get_contextvars()

    def test_setup_logging_explicit_level(self):
        """Test configuring with an explicit level and renderer."""
        from lexdesk.core.logging import setup_logging

        setup_logging(level="debug", console=False)
