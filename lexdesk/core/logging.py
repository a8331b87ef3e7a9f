"""
LexDesk - Logging Configuration

Structured logging through structlog. Request and query identifiers are
bound with contextvars so every log line emitted while answering a
question carries them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor

from lexdesk.core.config import settings


QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "anthropic", "openai")


def _renderer(console: bool) -> list[Processor]:
    if console:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def setup_logging(level: Optional[str] = None, console: Optional[bool] = None) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        console: Human-readable output instead of JSON, defaults to settings.DEBUG
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    console = settings.DEBUG if console is None else console

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ] + _renderer(console)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.contextvars.bind_contextvars(service=settings.APP_NAME, env=settings.APP_ENV)


def bind_log_context(**values) -> None:
    """Attach values to every log line in the current context."""
    structlog.contextvars.bind_contextvars(**values)


def unbind_log_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Gives a class a ``logger`` named after it."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)
