"""
Use cases: Manage user accounts.

The only component that enforces cross-record rules (email uniqueness,
existence) and assigns identity and timestamps. Storage is delegated to
the UserRepository port.

Failure cases:
    - NotFoundError when the target user does not exist.
    - ConflictError when an email is already held by another user.
Repository failures are propagated unchanged.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable

from app.application.users.dtos import (
    CreateUserCommand,
    ListUsersQuery,
    UpdateUserCommand,
)
from app.domain.users.entities import User, UserDraft, UserPatch
from app.domain.users.ports import UserRepository
from app.shared.errors import ConflictError, NotFoundError
from app.shared.logging import mask_email
from app.shared.pagination import PaginatedResult, build_pagination_meta

logger = logging.getLogger(__name__)

USER_RESOURCE = "User"


def utc_now() -> datetime:
    """Current UTC time truncated to millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def new_user_id() -> str:
    return str(uuid.uuid4())


class UserService:
    """Orchestrates user reads and writes on top of a repository.

    Writes run under a single lock so the find-by-email check and the
    mutation that follows it cannot interleave with another writer.
    """

    def __init__(
        self,
        repository: UserRepository,
        id_factory: Callable[[], str] = new_user_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Storage for user records.
            id_factory: Produces a fresh unique id per created user.
            clock: Produces the timestamp stamped on writes.
        """
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock
        self._write_lock = threading.Lock()

    def list_users(self, query: ListUsersQuery) -> PaginatedResult[User]:
        """Return one page of users with pagination metadata."""
        users, total = self._repository.find_all(query.page, query.limit)
        meta = build_pagination_meta(total, query.page, query.limit)
        logger.debug(
            "Users listed: total=%d, page=%d, limit=%d", total, query.page, query.limit
        )
        return PaginatedResult(data=users, meta=meta)

    def get_user_by_id(self, user_id: str) -> User:
        """Return a single user.

        Raises:
            NotFoundError: If no user has this id.
        """
        logger.debug("Looking up user: user_id=%s", user_id)
        user = self._repository.find_by_id(user_id)
        if user is None:
            logger.warning("User not found: user_id=%s", user_id)
            raise NotFoundError(USER_RESOURCE, user_id)
        return user

    def create_user(self, command: CreateUserCommand) -> User:
        """Create a user with a fresh id and timestamps.

        Raises:
            ConflictError: If the email is already in use.
        """
        with self._write_lock:
            self._ensure_email_available(command.email)

            user_id = self._id_factory()
            draft = UserDraft(name=command.name, email=command.email, role=command.role)
            logger.debug(
                "Persisting new user: user_id=%s, role=%s", user_id, command.role.value
            )
            user = self._repository.create(user_id, draft, self._clock())

        logger.info("User created: user_id=%s", user.id)
        return user

    def update_user(self, user_id: str, command: UpdateUserCommand) -> User:
        """Apply a partial update to a user.

        Raises:
            ConflictError: If the new email belongs to a different user.
            NotFoundError: If no user has this id.
        """
        patch = UserPatch(name=command.name, email=command.email, role=command.role)
        with self._write_lock:
            if patch.email is not None:
                self._ensure_email_available(patch.email, owner_id=user_id)

            logger.debug(
                "Updating user: user_id=%s, fields=%s", user_id, patch.supplied_fields()
            )
            user = self._repository.update(user_id, patch, self._clock())

        if user is None:
            logger.warning("User not found for update: user_id=%s", user_id)
            raise NotFoundError(USER_RESOURCE, user_id)

        logger.info("User updated: user_id=%s", user_id)
        return user

    def delete_user(self, user_id: str) -> None:
        """Remove a user.

        Raises:
            NotFoundError: If no user has this id.
        """
        logger.debug("Deleting user: user_id=%s", user_id)
        with self._write_lock:
            deleted = self._repository.delete(user_id)

        if not deleted:
            logger.warning("User not found for deletion: user_id=%s", user_id)
            raise NotFoundError(USER_RESOURCE, user_id)

        logger.info("User deleted: user_id=%s", user_id)

    def _ensure_email_available(self, email: str, owner_id: str | None = None) -> None:
        existing = self._repository.find_by_email(email)
        if existing is not None and existing.id != owner_id:
            logger.warning("Email already in use: email=%s", mask_email(email))
            raise ConflictError(f"A user with email '{email}' already exists")
