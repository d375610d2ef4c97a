"""
Shared error handling package.

Centralizes the operational error taxonomy and the error-to-HTTP
mapping so that failures are consistently translated into API responses.
"""

from app.shared.errors.base import (
    UNEXPECTED_ERROR_MESSAGE,
    AppError,
    ConflictError,
    ErrorCode,
    FieldError,
    NotFoundError,
    ValidationError,
    unexpected_error_body,
)

__all__ = [
    "UNEXPECTED_ERROR_MESSAGE",
    "AppError",
    "ConflictError",
    "ErrorCode",
    "FieldError",
    "NotFoundError",
    "ValidationError",
    "unexpected_error_body",
]
