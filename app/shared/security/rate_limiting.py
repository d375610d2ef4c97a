"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client request budget.
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

RATE_LIMITED_CODE = "RATE_LIMITED"
RATE_LIMITED_MESSAGE = "Too many requests, please try again later."


def build_limiter(default_limit: str, enabled: bool = True) -> Limiter:
    """Create a limiter keyed on the client address.

    Each application instance gets its own limiter so counters are not
    shared between apps built in the same process.

    Args:
        default_limit: slowapi limit string applied to every route, e.g. "100/minute".
        enabled: When False the limiter lets every request through.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
        headers_enabled=True,
    )


def enforce_rate_limit(request: Request, response: Response) -> None:
    """App-wide dependency that charges the request against the default limits.

    Runs once the route has been resolved, so the limit applies to every
    API route however routers are nested. Raises RateLimitExceeded when
    the client is over budget; otherwise the X-RateLimit-* headers are
    added to the outgoing response.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is not None:
        limiter._inject_headers(response, view_rate_limit)


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the standard error shape.
    """
    response = JSONResponse(
        status_code=429,
        content={"error": {"code": RATE_LIMITED_CODE, "message": RATE_LIMITED_MESSAGE}},
    )
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is None:
        return response
    return request.app.state.limiter._inject_headers(response, view_rate_limit)
