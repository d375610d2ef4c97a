"""
HTTP access logging.

One record per completed request with method, path, status and latency.
Headers and bodies are never logged. Health and docs traffic is skipped.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("app.access")

QUIET_PATH_PREFIXES = ("/health", "/docs", "/redoc")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Middleware that logs each request once it has been answered.

    An exception escaping the app is recorded as a 500, which is what the
    server error handler answers with.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            if not request.url.path.startswith(QUIET_PATH_PREFIXES):
                logger.info(
                    "%s %s -> %d (%.1f ms)",
                    request.method,
                    request.url.path,
                    status_code,
                    (time.perf_counter() - started) * 1000,
                )
