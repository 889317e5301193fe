"""
Bookstore Backend — Access Log Middleware
============================================

One line per request on the `bookstore.access` logger:

    GET /api/book/The%20Hobbit 200 3.2ms [a1b2c3d4] from 10.0.2.2

Bodies are never logged (register/login carry passwords), and neither is the
User-Id header.
"""

import logging
import time
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from bookstore.middleware.request_id import request_id_var

logger = logging.getLogger("bookstore.access")

DEFAULT_SKIP_PATHS = ("/health",)


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Args:
        skip_paths: exact paths that are not logged (the health check by
            default).
    """

    def __init__(self, app: ASGIApp, skip_paths: Optional[Iterable[str]] = None):
        super().__init__(app)
        self.skip_paths = frozenset(DEFAULT_SKIP_PATHS if skip_paths is None else skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.skip_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id_var.get(""),
            request.client.host if request.client else "unknown",
        )
        return response
