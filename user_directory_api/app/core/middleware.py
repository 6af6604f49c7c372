"""
HTTP middleware for request auditing and access logging.

``audit_request`` runs on every request and logs the method and path at
DEBUG level.  ``log_access`` writes one line per request in the compact
"tiny" access-log format::

    GET /api/usuarios 200 98 - 0.412 ms

It is installed only in the development environment (see
``main.create_app``).  Neither middleware alters the request or the
response.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(__name__ + ".access")

CallNext = Callable[[Request], Awaitable[Response]]


async def audit_request(request: Request, call_next: CallNext) -> Response:
    """Log each incoming request before it reaches the routes."""
    logger.debug("Registrando petición %s %s", request.method, request.url.path)
    return await call_next(request)


def format_access_line(method: str, url: str, status_code: int, content_length: str, elapsed_ms: float) -> str:
    """Render an access-log line in the "tiny" format."""
    return f"{method} {url} {status_code} {content_length} - {elapsed_ms:.3f} ms"


async def log_access(request: Request, call_next: CallNext) -> Response:
    """Time the request and log its outcome."""
    started = time.perf_counter()
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    try:
        response = await call_next(request)
    except Exception:
        # The error handler answers 500 further out; record it here too.
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(format_access_line(request.method, url, 500, "-", elapsed_ms))
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        format_access_line(
            request.method,
            url,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
        )
    )
    return response
