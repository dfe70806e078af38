"""
ContentType Repository

Database operations specific to the ContentType model.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.repositories.base import BaseRepository
from cms.shared.models.content_type import ContentType


class ContentTypeRepository(BaseRepository[ContentType]):
    """
    Repository for ContentType database operations.

    Both name and api_identifier are globally unique, so each has an
    exact-match lookup used by the service's uniqueness checks.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContentType, session)

    async def get_by_api_identifier(self, api_identifier: str) -> Optional[ContentType]:
        """
        Get content type by its API identifier.

        SQL Generated:
            SELECT * FROM content_types WHERE api_identifier = 'blog_post'
        """
        return await self._one_or_none(
            select(ContentType).where(ContentType.api_identifier == api_identifier)
        )

    async def get_by_name(self, name: str) -> Optional[ContentType]:
        """Get content type by its display name."""
        return await self._one_or_none(select(ContentType).where(ContentType.name == name))

    async def find_active(self) -> list[ContentType]:
        """All content types that have not been deactivated, by name."""
        return await self._all(
            select(ContentType).where(ContentType.active.is_(True)).order_by(ContentType.name)
        )
