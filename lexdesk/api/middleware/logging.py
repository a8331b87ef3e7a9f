"""
LexDesk - Request Logging Middleware
"""

import time
from uuid import uuid4

from fastapi import Request, Response

from lexdesk.core.logging import bind_log_context, get_logger, unbind_log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def logging_middleware(request: Request, call_next) -> Response:
    """
    Log each request and tag it with a request id.

    A caller-supplied X-Request-ID is reused so that a question can be
    followed across services. The id is bound to the log context for the
    duration of the request, including when the handler raises, and is
    echoed back in the response headers.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
    request.state.request_id = request_id
    bind_log_context(request_id=request_id)

    try:
        started = time.perf_counter()
        logger.info("Request received", method=request.method, path=request.url.path)

        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(elapsed_ms, 2),
        )
    finally:
        unbind_log_context("request_id")

    response.headers[REQUEST_ID_HEADER] = request_id
    response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"
    return response
