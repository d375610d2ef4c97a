"""
Centralized error handlers for FastAPI.

The single place where failures become HTTP responses:
- AppError subclasses are operational. The raise site owns the warning
  log; these handlers only serialize.
- Request validation failures become VALIDATION_ERROR responses.
- Unknown routes become RESOURCE_NOT_FOUND responses.
- Anything else is unexpected: logged at ERROR with full detail and
  answered with a generic 500. No stack traces or internal messages are
  exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.shared.errors.base import (
    AppError,
    ErrorCode,
    ValidationError,
    unexpected_error_body,
)
from app.shared.middleware.request_id import REQUEST_ID_HEADER, get_request_id
from app.shared.validation import to_field_errors

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
UNROUTED_STATUSES = frozenset({404, 405})


def _app_error_response(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.serialize(get_request_id(request)),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        """Serialize an operational error with its own status and code."""
        return _app_error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Turn schema violations into a VALIDATION_ERROR response."""
        fields = to_field_errors(exc.errors())
        logger.warning(
            "Request validation failed: %s %s fields=%s",
            request.method,
            request.url.path,
            [f.field for f in fields],
        )
        return _app_error_response(request, ValidationError(fields))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Map unknown routes and methods to RESOURCE_NOT_FOUND."""
        if exc.status_code not in UNROUTED_STATUSES:
            return await http_exception_handler(request, exc)
        error = AppError(ROUTE_NOT_FOUND_MESSAGE, ErrorCode.RESOURCE_NOT_FOUND)
        return _app_error_response(request, error)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        request_id = get_request_id(request)
        logger.error(
            "Unhandled error: %s %s request_id=%s error=%s",
            request.method,
            request.url,
            request_id,
            type(exc).__name__,
            exc_info=exc,
        )
        # Runs outside the request-id middleware, so echo the header here.
        headers = {REQUEST_ID_HEADER: request_id} if request_id else None
        return JSONResponse(
            status_code=ErrorCode.INTERNAL_SERVER_ERROR.status_code,
            content=unexpected_error_body(request_id),
            headers=headers,
        )
