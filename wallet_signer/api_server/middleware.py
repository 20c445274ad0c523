"""
HTTP middleware — request logging with request ids and timing.

Logs method, path, status and duration for every request. The query string is
never logged: it carries private keys and messages.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from wallet_signer.logging import bind_request, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    bind_request(request_id, path=request.url.path)
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000.0
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "http_request",
        method=request.method,
        status_code=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    return response
