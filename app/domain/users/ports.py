"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from app.domain.users.entities import User, UserDraft, UserPatch


class UserRepository(ABC):
    """Port for storing and retrieving users.

    Pure data operations: no business rules, no identity or clock
    concerns. Absence is reported with ``None``/``False``, never raised.
    """

    @abstractmethod
    def find_all(self, page: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users in insertion order and the total count.

        Args:
            page: 1-based page number.
            limit: Maximum number of users on the page.

        Returns:
            The users on the page (empty when past the end) and the
            size of the whole collection at call time.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user holding this normalized email, or None."""
        raise NotImplementedError

    @abstractmethod
    def create(self, user_id: str, draft: UserDraft, timestamp: datetime) -> User:
        """Append a new user built from caller-supplied id and timestamp."""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, user_id: str, patch: UserPatch, timestamp: datetime
    ) -> Optional[User]:
        """Merge supplied fields into a user and stamp ``updated_at``.

        Returns:
            The updated user, or None if no user has this id.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Remove a user. Returns whether a removal occurred."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored users."""
        raise NotImplementedError
