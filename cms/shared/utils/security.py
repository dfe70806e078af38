"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
Uses passlib's CryptContext (bcrypt by default, schemes come from
settings.PASSWORD_HASH_SCHEMES). Services never call the context directly;
they receive a PasswordHasher so tests can substitute a counting fake.

JWT Tokens:
===========
Uses PyJWT for JSON Web Token creation and validation.

Usage:
======
    from cms.shared.utils.security import BcryptPasswordHasher, SecurityUtils

    hasher = BcryptPasswordHasher()
    digest = hasher.hash("password123")
    assert hasher.verify("password123", digest)

    token = SecurityUtils.create_access_token(
        data={"sub": "42", "username": "alice"},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(hours=1),
    )
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

import jwt
from passlib.context import CryptContext

from cms.config.settings import settings


# Password hashing configuration
pwd_context = CryptContext(
    schemes=settings.PASSWORD_HASH_SCHEMES,
    deprecated="auto",
)


class PasswordHasher(Protocol):
    """One-way password encoder injected into services."""

    def hash(self, raw: str) -> str:
        ...

    def verify(self, raw: str, digest: str) -> bool:
        ...


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing through the configured CryptContext
    - JWT token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password with a fresh random salt.

        Args:
            password: Plain text password

        Returns:
            Salted hash string (self-describing, includes scheme and salt)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a stored hash.

        Malformed or unrecognised hashes count as a mismatch.
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., sub, username, role)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 24 hours)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta else timedelta(hours=24))

        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")


class BcryptPasswordHasher:
    """PasswordHasher backed by SecurityUtils (passlib bcrypt)."""

    def hash(self, raw: str) -> str:
        return SecurityUtils.hash_password(raw)

    def verify(self, raw: str, digest: str) -> bool:
        return SecurityUtils.verify_password(raw, digest)
