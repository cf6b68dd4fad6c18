"""Request logging middleware."""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response

from phenomena.utils.logger import bind_request_id, clear_request_context, get_logger

log = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def logging_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Bind a request id, log the request outcome and echo the id back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    bind_request_id(request_id)

    start = time.perf_counter()
    log.info("request started", method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        # Context stays bound so the outermost error handler can report the id
        log.exception(
            "request failed",
            method=request.method,
            path=request.url.path,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        raise

    log.info(
        "request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    clear_request_context()
    return response
