"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Closed set of roles a user can hold."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


DEFAULT_ROLE = Role.VIEWER


@dataclass(frozen=True)
class User:
    """A managed user account.

    ``id`` and both timestamps are assigned by the service layer.
    ``email`` is always stored lowercased.
    """

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserDraft:
    """Validated fields for a user that does not exist yet."""

    name: str
    email: str
    role: Role = DEFAULT_ROLE


@dataclass(frozen=True)
class UserPatch:
    """Partial set of changes for an existing user.

    A ``None`` field means "not supplied" and is left untouched.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Role] = None

    def supplied_fields(self) -> list[str]:
        """Return the names of the fields carrying a change."""
        return [
            name
            for name, value in (("name", self.name), ("email", self.email), ("role", self.role))
            if value is not None
        ]
