"""Transaction scoping of service mutations on idle sessions."""

import pytest

from cms.shared.core.exceptions import DuplicateUsernameError
from cms.shared.db.session import unit_of_work
from cms.shared.models import User
from cms.shared.repositories import UserRepository
from cms.shared.services import UserService


def _candidate(username: str = "alice", email: str = "alice@example.com") -> User:
    return User(username=username, email=email, password="longenough1")


async def test_idle_session_commits_its_own_transaction(session_factory, hasher):
    async with session_factory() as session:
        assert not session.in_transaction()

        created = await UserService(session, hasher=hasher).create_user(_candidate())

        assert not session.in_transaction()
        # Nothing left to undo once the mutation has committed
        await session.rollback()

    async with session_factory() as reader:
        stored = await UserRepository(reader).get_by_username("alice")

    assert stored is not None
    assert stored.id == created.id
    assert stored.password == "hashed:longenough1"


async def test_duplicate_on_idle_session_leaves_no_open_transaction(session_factory, hasher):
    async with session_factory() as session:
        await UserService(session, hasher=hasher).create_user(_candidate())

    async with session_factory() as session:
        with pytest.raises(DuplicateUsernameError):
            await UserService(session, hasher=hasher).create_user(
                _candidate(email="alice2@example.com")
            )

        assert not session.in_transaction()

    async with session_factory() as reader:
        repo = UserRepository(reader)
        assert await repo.count() == 1
        assert await repo.email_exists("alice2@example.com") is False
    assert hasher.hash_calls == 1


async def test_failure_inside_unit_of_work_rolls_back_flushed_rows(session_factory):
    async with session_factory() as session:
        with pytest.raises(RuntimeError):
            async with unit_of_work(session):
                session.add(User(username="ghost", email="ghost@example.com", password="x"))
                await session.flush()
                raise RuntimeError("boom")

        assert not session.in_transaction()

    async with session_factory() as reader:
        assert await UserRepository(reader).username_exists("ghost") is False


async def test_open_transaction_is_joined_not_committed(session_factory, hasher):
    async with session_factory() as session:
        await session.begin()

        await UserService(session, hasher=hasher).create_user(_candidate())

        assert session.in_transaction()
        await session.rollback()

    async with session_factory() as reader:
        assert await UserRepository(reader).username_exists("alice") is False
