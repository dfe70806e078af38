"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from cms.shared.models.enums import UserRole
from cms.shared.models.user import User
from cms.shared.schemas.common import BaseSchema


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(
        min_length=3,
        max_length=50,
        pattern=r"^[a-zA-Z0-9_]+$",
        description="Letters, digits and underscore (3-50 characters)",
    )
    email: EmailStr
    password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )
    role: UserRole = UserRole.AUTHOR
    active: bool = True

    def to_entity(self) -> User:
        """Build an unsaved User carrying the raw password."""
        return User(
            username=self.username,
            email=self.email,
            password=self.password,
            role=self.role,
            active=self.active,
        )


class UserResponse(BaseSchema):
    """Schema for user response. The password digest is never exposed."""

    id: int
    username: str
    email: str
    role: UserRole
    active: bool
    created_at: datetime
    updated_at: datetime


class LoginRequest(BaseModel):
    """Schema for user login."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Schema for authentication response."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
