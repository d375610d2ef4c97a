"""
Operational error taxonomy.

Every failure the application anticipates is an AppError carrying one of
a closed set of error codes. The boundary handlers match on the code to
build the HTTP response. Anything that is not an AppError is treated as
an unexpected failure.
No framework imports allowed.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorCode(str, Enum):
    """Closed set of error codes exposed to API clients."""

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def status_code(self) -> int:
        """HTTP status bound to this code."""
        return _STATUS_BY_CODE[self]


_STATUS_BY_CODE = {
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.CONFLICT: 409,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
}


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure.

    Attributes:
        field: Dotted path of the offending field, or "root".
        message: Human-readable reason.
    """

    field: str
    message: str


class AppError(Exception):
    """Base error for all operational errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: Optional[list[FieldError]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.code.status_code

    def serialize(self, request_id: Optional[str] = None) -> dict[str, Any]:
        """Build the client-facing error body.

        Args:
            request_id: Correlation id of the failing request, if known.

        Returns:
            ``{"error": {...}}`` with ``details`` and ``requestId`` only
            present when they carry a value.
        """
        body: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.details is not None:
            body["details"] = [asdict(detail) for detail in self.details]
        if request_id:
            body["requestId"] = request_id
        return {"error": body}


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            f"{resource} with id '{resource_id}' not found",
            ErrorCode.RESOURCE_NOT_FOUND,
        )
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(AppError):
    """Raised when a write would break a uniqueness rule."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.CONFLICT)


class ValidationError(AppError):
    """Raised when request input does not match its declared shape."""

    def __init__(self, fields: list[FieldError]) -> None:
        super().__init__(
            "Request validation failed", ErrorCode.VALIDATION_ERROR, list(fields)
        )


def unexpected_error_body(request_id: Optional[str] = None) -> dict[str, Any]:
    """Return the fixed body used for every unexpected failure."""
    body: dict[str, Any] = {
        "code": ErrorCode.INTERNAL_SERVER_ERROR.value,
        "message": UNEXPECTED_ERROR_MESSAGE,
    }
    if request_id:
        body["requestId"] = request_id
    return {"error": body}
