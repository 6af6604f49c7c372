"""
Authentication hook for incoming requests.

The directory has no accounts or credentials yet, so
``authenticate_request`` only records that the authentication step ran
and hands the request to the next layer unchanged.  Replace the body of
this middleware once real credentials exist; the routes do not need to
change.
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)


async def authenticate_request(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Pass-through authentication middleware."""
    logger.debug("Autenticando...")
    return await call_next(request)
