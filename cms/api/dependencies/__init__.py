"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser, EditorUser
- Pagination: get_pagination()
- Services: get_*_service() functions

Usage:
======
    from cms.api.dependencies import CurrentUser

    @router.post("")
    async def upload(data: MediaCreate, current_user: CurrentUser):
        ...
"""

from cms.api.dependencies.database import (
    get_db,
    DbSession,
)
from cms.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    require_editor,
    CurrentUser,
    EditorUser,
)
from cms.api.dependencies.pagination import get_pagination

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "require_editor",
    "CurrentUser",
    "EditorUser",
    # Pagination
    "get_pagination",
]
