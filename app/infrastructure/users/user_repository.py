"""
Adapter: In-memory user storage.

Implements the UserRepository port over a process-wide list.
State lives for the lifetime of the instance and is never persisted.
"""

import threading
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from app.domain.users.entities import User, UserDraft, UserPatch
from app.domain.users.ports import UserRepository
from app.shared.pagination import to_offset


class InMemoryUserRepository(UserRepository):
    """List-backed user repository.

    Keeps users in insertion order. Mutations are serialized with a lock
    so the adapter is safe to share across worker threads.
    """

    def __init__(self, initial: Optional[Iterable[User]] = None) -> None:
        self._users: list[User] = list(initial or [])
        self._lock = threading.Lock()

    def find_all(self, page: int, limit: int) -> tuple[list[User], int]:
        with self._lock:
            offset = to_offset(page, limit)
            return self._users[offset : offset + limit], len(self._users)

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users if u.id == user_id), None)

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users if u.email == email), None)

    def create(self, user_id: str, draft: UserDraft, timestamp: datetime) -> User:
        user = User(
            id=user_id,
            name=draft.name,
            email=draft.email,
            role=draft.role,
            created_at=timestamp,
            updated_at=timestamp,
        )
        with self._lock:
            self._users.append(user)
        return user

    def update(
        self, user_id: str, patch: UserPatch, timestamp: datetime
    ) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            changes = {field: getattr(patch, field) for field in patch.supplied_fields()}
            updated = replace(self._users[index], **changes, updated_at=timestamp)
            self._users[index] = updated
            return updated

    def delete(self, user_id: str) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: str) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None
