"""
Tests for the in-memory user repository adapter.

Pure data behavior: slicing, lookups, merges and removals.
No business rules are expected here.
"""

import threading
from datetime import datetime, timezone

import pytest

from app.domain.users.entities import Role, UserDraft, UserPatch
from app.infrastructure.users.seed_data import seed_users
from app.infrastructure.users.user_repository import InMemoryUserRepository
from conftest import make_user

LATER = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestFindAll:
    def test_returns_insertion_order_and_total(self, repository) -> None:
        users, total = repository.find_all(page=1, limit=10)
        assert [u.id for u in users] == ["user-1", "user-2", "user-3"]
        assert total == 3

    def test_slices_requested_page(self, repository) -> None:
        users, total = repository.find_all(page=2, limit=2)
        assert [u.id for u in users] == ["user-3"]
        assert total == 3

    def test_out_of_range_page_is_empty(self, repository) -> None:
        users, total = repository.find_all(page=5, limit=10)
        assert users == []
        assert total == 3

    @pytest.mark.parametrize("total", [0, 1, 9, 10, 23])
    @pytest.mark.parametrize(("page", "limit"), [(1, 1), (1, 10), (2, 10), (3, 4), (7, 5)])
    def test_page_size_formula(self, total: int, page: int, limit: int) -> None:
        repo = InMemoryUserRepository([make_user(i) for i in range(total)])
        users, _ = repo.find_all(page, limit)
        assert len(users) == max(0, min(limit, total - (page - 1) * limit))

    def test_returned_page_is_a_copy(self, repository) -> None:
        users, _ = repository.find_all(page=1, limit=10)
        users.clear()
        assert repository.count() == 3


class TestLookups:
    def test_find_by_id(self, repository) -> None:
        assert repository.find_by_id("user-2").name == "User 2"
        assert repository.find_by_id("missing") is None

    def test_find_by_email_is_exact(self, repository) -> None:
        assert repository.find_by_email("user1@example.com").id == "user-1"
        assert repository.find_by_email("USER1@example.com") is None


class TestCreate:
    def test_appends_with_caller_supplied_id_and_timestamp(self, repository) -> None:
        user = repository.create(
            "new-id", UserDraft(name="Nina", email="nina@example.com"), LATER
        )
        assert user.id == "new-id"
        assert user.role is Role.VIEWER
        assert user.created_at == user.updated_at == LATER
        users, total = repository.find_all(page=1, limit=10)
        assert total == 4
        assert users[-1] == user


class TestUpdate:
    def test_merges_only_supplied_fields(self, repository) -> None:
        before = repository.find_by_id("user-1")
        updated = repository.update("user-1", UserPatch(role=Role.ADMIN), LATER)
        assert updated.role is Role.ADMIN
        assert updated.name == before.name
        assert updated.email == before.email
        assert updated.created_at == before.created_at
        assert updated.updated_at == LATER
        assert repository.find_by_id("user-1") == updated

    def test_keeps_position(self, repository) -> None:
        repository.update("user-2", UserPatch(name="Renamed"), LATER)
        users, _ = repository.find_all(page=1, limit=10)
        assert [u.id for u in users] == ["user-1", "user-2", "user-3"]

    def test_missing_id_returns_none(self, repository) -> None:
        assert repository.update("missing", UserPatch(name="Ghost"), LATER) is None


class TestDelete:
    def test_removes_existing(self, repository) -> None:
        assert repository.delete("user-2") is True
        assert repository.find_by_id("user-2") is None
        assert repository.count() == 2

    def test_missing_id_reports_false(self, repository) -> None:
        assert repository.delete("missing") is False
        assert repository.count() == 3


class TestConcurrentCreates:
    def test_parallel_appends_are_not_lost(self) -> None:
        repo = InMemoryUserRepository()

        def worker(offset: int) -> None:
            for i in range(50):
                repo.create(
                    f"{offset}-{i}",
                    UserDraft(name="Worker", email=f"w{offset}-{i}@example.com"),
                    LATER,
                )

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert repo.count() == 200


class TestSeedData:
    def test_demo_users_cover_every_role_with_unique_emails(self) -> None:
        users = seed_users()
        assert len(users) == 10
        assert {u.role for u in users} == set(Role)
        assert len({u.email for u in users}) == 10
        assert all(u.created_at == u.updated_at for u in users)
