"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.users.entities import DEFAULT_ROLE, Role
from app.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE


@dataclass(frozen=True)
class ListUsersQuery:
    """Input DTO for listing users one page at a time.

    Attributes:
        page: 1-based page number.
        limit: Page size (1-100).
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        name: Trimmed display name.
        email: Lowercased email address.
        role: Role to grant; viewer when omitted.
    """

    name: str
    email: str
    role: Role = DEFAULT_ROLE


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for a partial user update.

    Only non-None fields are applied.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Role] = None
