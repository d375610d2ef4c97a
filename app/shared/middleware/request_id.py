"""
Request correlation middleware.

Reuses the caller's ``x-request-id`` when present and non-blank,
otherwise generates a UUID4. The id is stored on ``request.state``,
published to log records, and echoed on the response.
"""

import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.shared.logging import request_id_var

REQUEST_ID_HEADER = "x-request-id"


def resolve_request_id(incoming: Optional[str]) -> str:
    """Return the incoming id if usable, else a freshly generated one."""
    if incoming is not None and incoming.strip():
        return incoming
    return str(uuid.uuid4())


def get_request_id(request: Request) -> Optional[str]:
    """Return the correlation id assigned to this request, if any."""
    return getattr(request.state, "request_id", None)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns and echoes a correlation id per request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
