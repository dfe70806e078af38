"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_username()  → Find user by exact (case-sensitive) username
- get_by_email()     → Find user by exact email
- username_exists()  → Uniqueness pre-check for registration
- email_exists()     → Uniqueness pre-check for registration
- find_active()      → All users with active = true
- find_by_role()     → All users holding a role
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.repositories.base import BaseRepository
from cms.shared.models.enums import UserRole
from cms.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        The comparison is exact: "TestUser" and "testuser" are different keys.

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice'
        """
        return await self._one_or_none(select(User).where(User.username == username))

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        SQL Generated:
            SELECT * FROM users WHERE email = 'alice@example.com'
        """
        return await self._one_or_none(select(User).where(User.email == email))

    async def username_exists(self, username: str) -> bool:
        """Check if a username is already registered."""
        return await self.get_by_username(username) is not None

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        return await self.get_by_email(email) is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # FILTER METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_active(self) -> list[User]:
        """All users whose account is active."""
        return await self._all(select(User).where(User.active.is_(True)).order_by(User.id))

    async def find_by_role(self, role: UserRole) -> list[User]:
        """All users holding the given role."""
        return await self._all(select(User).where(User.role == role).order_by(User.id))
