"""
User Entity Model

Represents a CMS account (administrator, editor, author or viewer).

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ username         │ "alice"                                                   │
│ email            │ "alice@example.com"                                       │
│ password         │ "$2b$12$..."  (bcrypt digest, never plaintext)            │
│ role             │ AUTHOR                                                    │
│ active           │ true                                                      │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Users are never physically removed by the service layer; "deleting" an
account means setting active=False.
"""

from sqlalchemy import Boolean, Enum, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from cms.shared.models.base import Base, TimestampMixin
from cms.shared.models.enums import UserRole


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Generated integer key
        username: Unique login name, 3-50 chars of [a-zA-Z0-9_]
        email: Unique email address
        password: One-way digest of the password
        role: UserRole, AUTHOR unless specified
        active: False once the account is deactivated
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        nullable=False,
        index=True,
    )

    password: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", native_enum=False, length=20),
        nullable=False,
        default=UserRole.AUTHOR,
    )

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    def __repr__(self) -> str:
        """String representation for debugging (never includes the digest)."""
        return (
            f"<User(id={self.id}, username={self.username}, email={self.email}, "
            f"role={self.role}, active={self.active})>"
        )
