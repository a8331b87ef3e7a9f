"""
LexDesk - Error Handler Middleware
"""

from __future__ import annotations

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from lexdesk.core.exceptions import (
    ConfigurationError,
    DocumentNotFoundError,
    DuplicateDocumentError,
    LexDeskException,
)
from lexdesk.core.logging import get_logger

logger = get_logger(__name__)

# Checked in order; the first matching class wins.
STATUS_BY_EXCEPTION: list[tuple[type[LexDeskException], int]] = [
    (DocumentNotFoundError, 404),
    (DuplicateDocumentError, 409),
    (ConfigurationError, 500),
]


def status_for(exc: LexDeskException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 400


async def error_handler_middleware(request: Request, call_next) -> Response:
    """Turn exceptions escaping a route into JSON error bodies."""
    try:
        return await call_next(request)
    except LexDeskException as e:
        status_code = status_for(e)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "Request failed",
            path=request.url.path,
            status_code=status_code,
            code=e.code,
            message=e.message,
        )
        return JSONResponse(
            status_code=status_code,
            content=e.to_dict(),
        )
    except Exception as e:
        logger.exception("Unhandled exception", path=request.url.path, error=str(e))
        return JSONResponse(
            status_code=500,
            content={"error": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
        )
