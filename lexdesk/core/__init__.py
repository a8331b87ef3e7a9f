"""
LexDesk - Core Module

This module provides core functionality used throughout the application:
- Configuration management
- Logging
- Custom exceptions
- Shared type definitions
"""

from lexdesk.core.config import Settings, get_settings, settings
from lexdesk.core.exceptions import (
    LexDeskException,
    InvalidArgumentError,
    RetrievalError,
    DocumentNotFoundError,
    DuplicateDocumentError,
    GenerationError,
    LLMError,
    LLMRateLimitError,
    ValidationError,
    ConfigurationError,
)
from lexdesk.core.logging import (
    get_logger,
    setup_logging,
    bind_log_context,
    unbind_log_context,
    LoggerMixin,
)
from lexdesk.core.types import (
    DocumentCategory,
    RankingPreset,
    Document,
    DocumentUpdate,
    DocumentValidationReport,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "settings",
    # Logging
    "get_logger",
    "setup_logging",
    "bind_log_context",
    "unbind_log_context",
    "LoggerMixin",
    # Exceptions
    "LexDeskException",
    "InvalidArgumentError",
    "RetrievalError",
    "DocumentNotFoundError",
    "DuplicateDocumentError",
    "GenerationError",
    "LLMError",
    "LLMRateLimitError",
    "ValidationError",
    "ConfigurationError",
    # Types
    "DocumentCategory",
    "RankingPreset",
    "Document",
    "DocumentUpdate",
    "DocumentValidationReport",
]
