"""Tests for UserService."""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from cms.shared.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    DuplicateUsernameError,
)
from cms.shared.models import User, UserRole
from cms.shared.repositories import UserRepository
from cms.shared.services import UserService


def _assign_id(entity: User) -> User:
    entity.id = 1
    return entity


@pytest.fixture
def session():
    session = MagicMock()
    session.in_transaction.return_value = True
    return session


@pytest.fixture
def repo():
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_hasher():
    hasher = Mock()
    hasher.hash.side_effect = lambda raw: f"digest:{raw}"
    hasher.verify.side_effect = lambda raw, digest: digest == f"digest:{raw}"
    return hasher


@pytest.fixture
def service(session, repo, mock_hasher):
    return UserService(session, repo=repo, hasher=mock_hasher)


def _alice(email: str = "alice@example.com") -> User:
    return User(username="alice", email=email, password="secret123")


# ═══════════════════════════════════════════════════════════════════════════════
# create_user
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_user_hashes_once_and_saves_once(service, repo, mock_hasher):
    repo.username_exists.return_value = False
    repo.email_exists.return_value = False
    repo.save.side_effect = _assign_id

    user = await service.create_user(_alice())

    assert user.id == 1
    assert user.password == "digest:secret123"
    assert user.active is True
    assert user.role == UserRole.AUTHOR
    mock_hasher.hash.assert_called_once_with("secret123")
    repo.save.assert_awaited_once()


async def test_create_user_checks_username_before_email(service, repo):
    repo.username_exists.return_value = False
    repo.email_exists.return_value = False
    repo.save.side_effect = _assign_id

    await service.create_user(_alice())

    called = [name for name, _args, _kwargs in repo.mock_calls]
    assert called == ["username_exists", "email_exists", "save"]


async def test_duplicate_username_never_looks_up_email(service, repo, mock_hasher):
    repo.username_exists.return_value = True

    with pytest.raises(DuplicateUsernameError) as exc_info:
        await service.create_user(_alice(email="other@example.com"))

    assert exc_info.value.message == "Username 'alice' is already taken"
    assert exc_info.value.status_code == 409
    assert exc_info.value.details == {"field": "username", "value": "alice"}
    repo.email_exists.assert_not_awaited()
    mock_hasher.hash.assert_not_called()
    repo.save.assert_not_awaited()


async def test_duplicate_email_rejected_without_hashing(service, repo, mock_hasher):
    repo.username_exists.return_value = False
    repo.email_exists.return_value = True

    with pytest.raises(DuplicateEmailError) as exc_info:
        await service.create_user(_alice())

    assert exc_info.value.message == "Email 'alice@example.com' is already registered"
    mock_hasher.hash.assert_not_called()
    repo.save.assert_not_awaited()


async def test_create_user_keeps_explicit_role_and_active(service, repo):
    repo.username_exists.return_value = False
    repo.email_exists.return_value = False
    repo.save.side_effect = _assign_id

    candidate = User(
        username="ed",
        email="ed@example.com",
        password="secret123",
        role=UserRole.EDITOR,
        active=False,
    )
    user = await service.create_user(candidate)

    assert user.role == UserRole.EDITOR
    assert user.active is False


# ═══════════════════════════════════════════════════════════════════════════════
# lookups
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("user_id", [0, -1, 999])
async def test_find_by_id_absent_returns_none(service, repo, user_id):
    repo.get.return_value = None

    assert await service.find_by_id(user_id) is None


async def test_find_by_username_empty_string_returns_none(service, repo):
    assert await service.find_by_username("") is None
    repo.get_by_username.assert_not_awaited()


# ═══════════════════════════════════════════════════════════════════════════════
# authenticate
# ═══════════════════════════════════════════════════════════════════════════════


async def test_authenticate_accepts_matching_password(service, repo):
    stored = User(id=7, username="alice", email="a@example.com", password="digest:secret123", active=True)
    repo.get_by_username.return_value = stored

    assert await service.authenticate("alice", "secret123") is stored


@pytest.mark.parametrize(
    "stored",
    [
        None,
        User(id=7, username="alice", email="a@example.com", password="digest:other", active=True),
        User(id=7, username="alice", email="a@example.com", password="digest:secret123", active=False),
    ],
    ids=["unknown", "wrong-password", "inactive"],
)
async def test_authenticate_rejects(service, repo, stored):
    repo.get_by_username.return_value = stored

    with pytest.raises(AuthenticationError) as exc_info:
        await service.authenticate("alice", "secret123")

    assert exc_info.value.message == "Invalid username or password"


# ═══════════════════════════════════════════════════════════════════════════════
# against the database
# ═══════════════════════════════════════════════════════════════════════════════


async def test_alice_registration_against_database(db_session, hasher):
    service = UserService(db_session, hasher=hasher)

    alice = await service.create_user(_alice())

    assert alice.id is not None
    assert alice.password == "hashed:secret123"
    assert alice.active is True
    assert alice.role == UserRole.AUTHOR
    assert hasher.hash_calls == 1

    with pytest.raises(DuplicateUsernameError, match="Username 'alice' is already taken"):
        await service.create_user(_alice(email="alice2@example.com"))
    assert hasher.hash_calls == 1


async def test_find_by_username_is_case_sensitive(db_session, hasher):
    service = UserService(db_session, hasher=hasher)
    await service.create_user(User(username="TestUser", email="t@example.com", password="secret123"))

    assert await service.find_by_username("TestUser") is not None
    assert await service.find_by_username("testuser") is None


@pytest.mark.parametrize("user_id", [0, -1, 12345])
async def test_find_by_id_unknown_ids_against_database(db_session, hasher, user_id):
    service = UserService(db_session, hasher=hasher)

    assert await service.find_by_id(user_id) is None


async def test_list_and_count_users(db_session, make_user, hasher):
    for name in ("ann", "bob", "cid"):
        await make_user(username=name)
    service = UserService(db_session, hasher=hasher)

    assert await service.count_users() == 3
    page = await service.list_users(offset=0, limit=2)
    assert [user.username for user in page] == ["cid", "bob"]
