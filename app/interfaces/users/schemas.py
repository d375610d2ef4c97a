"""
Pydantic schemas for users API request/response validation.

These schemas enforce input validation and define the API contract.
Inputs are coerced (trimmed names, lowercased emails, integer query
params) so handlers never re-parse raw values.
No business logic belongs here.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.domain.users.entities import DEFAULT_ROLE, Role, User
from app.shared.pagination import PaginationMeta

NAME_MIN_LEN = 2
NAME_MAX_LEN = 100

UserName = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN
    ),
]
UserEmail = Annotated[EmailStr, AfterValidator(str.lower)]


class CreateUserRequest(BaseModel):
    """Request body for POST /users.

    Attributes:
        name: Display name, 2-100 chars after trimming.
        email: Valid email address, stored lowercased.
        role: One of admin, editor, viewer. Defaults to viewer.
    """

    name: UserName = Field(..., description="Display name")
    email: UserEmail = Field(..., description="Unique email address")
    role: Role = Field(default=DEFAULT_ROLE, description="Access role")


class UpdateUserRequest(BaseModel):
    """Request body for PATCH /users/{id}. At least one field is required."""

    name: Optional[UserName] = Field(default=None, description="Display name")
    email: Optional[UserEmail] = Field(default=None, description="Unique email address")
    role: Optional[Role] = Field(default=None, description="Access role")

    @field_validator("name", "email", "role", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} may be omitted but must not be null")
        return value

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateUserRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(_CamelModel):
    """A user as returned by the API."""

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        """Render as ISO-8601 UTC with millisecond precision."""
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        )

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserEnvelope(BaseModel):
    """Single-user response wrapper."""

    data: UserResponse


class PaginationMetaResponse(_CamelModel):
    """Page metadata for list responses."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationMetaResponse":
        return cls(
            page=meta.page, limit=meta.limit, total=meta.total, total_pages=meta.total_pages
        )


class UserListResponse(BaseModel):
    """Response schema for GET /users."""

    data: list[UserResponse]
    meta: PaginationMetaResponse


class FieldErrorSchema(BaseModel):
    """A field-level validation failure."""

    field: str
    message: str


class ErrorBody(_CamelModel):
    """Error payload shared by every error response."""

    code: str
    message: str
    details: Optional[list[FieldErrorSchema]] = None
    request_id: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: ErrorBody
