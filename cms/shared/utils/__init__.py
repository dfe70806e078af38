"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from cms.shared.utils import BcryptPasswordHasher, SecurityUtils
"""

from cms.shared.utils.security import BcryptPasswordHasher, PasswordHasher, SecurityUtils

__all__ = [
    "BcryptPasswordHasher",
    "PasswordHasher",
    "SecurityUtils",
]
