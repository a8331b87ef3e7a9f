from __future__ import annotations

from lexdesk.api.middleware.error_handler import error_handler_middleware
from lexdesk.api.middleware.logging import logging_middleware

__all__ = [
    "error_handler_middleware",
    "logging_middleware",
]
