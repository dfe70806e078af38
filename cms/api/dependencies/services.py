"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request with the request's db session. They
hold no state beyond the session and their repositories.

Usage:
======
    from cms.api.dependencies.services import get_user_service

    @router.post("")
    async def create_user(
        data: UserCreate,
        user_service: UserService = Depends(get_user_service),
    ):
        return await user_service.create_user(data.to_entity())
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms.api.dependencies.database import get_db
from cms.shared.services.content_service import ContentService
from cms.shared.services.content_type_service import ContentTypeService
from cms.shared.services.media_service import MediaService
from cms.shared.services.user_service import UserService


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """Dependency to get UserService instance (bcrypt hasher)."""
    return UserService(db)


async def get_content_type_service(
    db: AsyncSession = Depends(get_db),
) -> ContentTypeService:
    return ContentTypeService(db)


async def get_content_service(
    db: AsyncSession = Depends(get_db),
) -> ContentService:
    return ContentService(db)


async def get_media_service(
    db: AsyncSession = Depends(get_db),
) -> MediaService:
    return MediaService(db)
