"""
Demo records loaded into the in-memory store at startup.

Covers every role and provides enough users to exercise pagination.
"""

from datetime import datetime, timezone

from app.domain.users.entities import Role, User


def _at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=timezone.utc)


_SEED = [
    ("11111111-0000-0000-0000-000000000001", "Alice Nguyen", "alice@example.com", Role.ADMIN, _at(10, 8)),
    ("11111111-0000-0000-0000-000000000002", "Bob Chen", "bob@example.com", Role.EDITOR, _at(11, 9, 15)),
    ("11111111-0000-0000-0000-000000000003", "Carol Smith", "carol@example.com", Role.VIEWER, _at(12, 10, 30)),
    ("11111111-0000-0000-0000-000000000004", "David Kim", "david@example.com", Role.EDITOR, _at(13, 11)),
    ("11111111-0000-0000-0000-000000000005", "Eva Martinez", "eva@example.com", Role.VIEWER, _at(14, 12)),
    ("11111111-0000-0000-0000-000000000006", "Frank Obi", "frank@example.com", Role.ADMIN, _at(15, 13)),
    ("11111111-0000-0000-0000-000000000007", "Grace Lee", "grace@example.com", Role.VIEWER, _at(16, 14)),
    ("11111111-0000-0000-0000-000000000008", "Henry Park", "henry@example.com", Role.EDITOR, _at(17, 15)),
    ("11111111-0000-0000-0000-000000000009", "Irene Walsh", "irene@example.com", Role.VIEWER, _at(18, 16)),
    ("11111111-0000-0000-0000-000000000010", "James Torres", "james@example.com", Role.EDITOR, _at(19, 17)),
]


def seed_users() -> list[User]:
    """Return a fresh list of the demo users."""
    return [
        User(
            id=user_id,
            name=name,
            email=email,
            role=role,
            created_at=created,
            updated_at=created,
        )
        for user_id, name, email, role, created in _SEED
    ]
