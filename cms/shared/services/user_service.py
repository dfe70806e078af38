"""
User Service

Business logic for user registration, lookup and authentication.

Registration Flow:
==================
┌─────────────────────────────────────────────────────────────────────────────┐
│  create_user(candidate)                                                     │
│                                                                             │
│  1. username taken?  → DuplicateUsernameError   (email is not looked up)    │
│  2. email taken?     → DuplicateEmailError                                  │
│  3. hash password    (exactly once)                                         │
│  4. save user        (exactly once)                                         │
│                                                                             │
│  Steps 3-4 never run when 1 or 2 rejects the candidate.                     │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
======
    from cms.shared.services.user_service import UserService

    service = UserService(db)
    user = await service.create_user(
        User(username="alice", email="alice@example.com", password="pw123456")
    )
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    DuplicateUsernameError,
)
from cms.shared.core.logging import get_logger
from cms.shared.db.session import unit_of_work
from cms.shared.models.enums import UserRole
from cms.shared.models.user import User
from cms.shared.repositories.user_repository import UserRepository
from cms.shared.utils.security import BcryptPasswordHasher, PasswordHasher


logger = get_logger("cms.services.user")


class UserService:
    """
    Service for user-related business logic.

    Attributes:
        session: Database session
        repo: UserRepository instance
        hasher: Password encoder applied to raw passwords before storage
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: Optional[UserRepository] = None,
        hasher: Optional[PasswordHasher] = None,
    ) -> None:
        self.session = session
        self.repo = repo if repo is not None else UserRepository(session)
        self.hasher = hasher if hasher is not None else BcryptPasswordHasher()

    async def create_user(self, candidate: User) -> User:
        """
        Register a new user.

        Args:
            candidate: Unsaved user whose password field holds the raw password.
                Role defaults to AUTHOR and active to True when unset.

        Returns:
            The persisted user with its generated id and hashed password

        Raises:
            DuplicateUsernameError: If the username is taken
            DuplicateEmailError: If the username is free but the email is taken
        """
        async with unit_of_work(self.session):
            if await self.repo.username_exists(candidate.username):
                raise DuplicateUsernameError(candidate.username)

            if await self.repo.email_exists(candidate.email):
                raise DuplicateEmailError(candidate.email)

            digest = self.hasher.hash(candidate.password)
            user = candidate.copy_with(
                password=digest,
                role=candidate.role if candidate.role is not None else UserRole.AUTHOR,
                active=candidate.active if candidate.active is not None else True,
            )
            user = await self.repo.save(user)

        logger.info("User created", user_id=user.id, username=user.username, role=user.role)
        return user

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by id, or None for unknown, zero or negative ids."""
        return await self.repo.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Get a user by exact, case-sensitive username."""
        if not username:
            return None
        return await self.repo.get_by_username(username)

    async def authenticate(self, username: str, password: str) -> User:
        """
        Verify credentials.

        Unknown usernames, inactive accounts and wrong passwords all
        produce the same error so the response does not reveal which
        one failed.

        Raises:
            AuthenticationError: If the credentials are not accepted
        """
        user = await self.find_by_username(username)
        if user is None or not user.active:
            raise AuthenticationError("Invalid username or password")

        if not self.hasher.verify(password, user.password):
            raise AuthenticationError("Invalid username or password")

        return user

    async def list_users(self, offset: int = 0, limit: int = 20) -> list[User]:
        users = await self.repo.list(offset=offset, limit=limit)
        return list(users)

    async def count_users(self) -> int:
        return await self.repo.count()
