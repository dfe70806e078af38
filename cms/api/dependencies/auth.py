"""
Authentication Dependencies

FastAPI dependencies for user authentication and authorization.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Turn token claims into a user dict
           │
           ▼
    require_editor()          ← Reject roles below EDITOR

Type Aliases:
=============
    CurrentUser  - Authenticated user from JWT
    EditorUser   - Authenticated ADMIN or EDITOR

Usage:
======
    from cms.api.dependencies.auth import CurrentUser

    @router.post("")
    async def create_content(data: ContentCreate, current_user: CurrentUser):
        candidate = data.to_entity(author_id=current_user["user_id"])
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from cms.config.settings import settings
from cms.shared.core.exceptions import AuthenticationError, AuthorizationError
from cms.shared.models.enums import UserRole
from cms.shared.utils.security import SecurityUtils


# Missing credentials are reported as 401 by get_current_user_token
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Returns:
        Dict with user_id (int), username and role

    Raises:
        AuthenticationError: If the subject claim is missing or malformed
    """
    subject = token.get("sub")
    if not subject or not str(subject).isdigit():
        raise AuthenticationError("Invalid token payload")

    return {
        "user_id": int(subject),
        "username": token.get("username"),
        "role": token.get("role"),
    }


async def require_editor(
    current_user: Annotated[dict, Depends(get_current_user)],
) -> dict:
    """
    Allow only ADMIN and EDITOR users.

    Raises:
        AuthorizationError: For AUTHOR and VIEWER users
    """
    if current_user["role"] not in (UserRole.ADMIN.value, UserRole.EDITOR.value):
        raise AuthorizationError("Editor or admin role required")
    return current_user


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]

EditorUser = Annotated[dict, Depends(require_editor)]
