"""
Content Service

Business logic for content items.

PUBLISHING:
- publish_content() needs non-blank content_data, nothing else
- status becomes PUBLISHED and publish_date the current UTC time
- any current status may be re-published (draft, published, archived)
- content_data is never checked against the content type's field definitions

Usage:
======
    from cms.shared.services.content_service import ContentService

    service = ContentService(db)
    draft = await service.create_content(candidate)
    published = await service.publish_content(draft.id)
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.core.exceptions import (
    ContentNotFoundError,
    DuplicateSlugError,
    EmptyContentError,
)
from cms.shared.core.logging import get_logger
from cms.shared.db.session import unit_of_work
from cms.shared.models.content import Content
from cms.shared.models.enums import ContentStatus
from cms.shared.repositories.content_repository import ContentRepository


logger = get_logger("cms.services.content")


class ContentService:
    """
    Service for content-related business logic.

    Handles:
    - Creating content (slug unique within its content type)
    - Publishing
    - Published listings and raw-data search
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: Optional[ContentRepository] = None,
    ) -> None:
        self.session = session
        self.repo = repo if repo is not None else ContentRepository(session)

    async def create_content(self, candidate: Content) -> Content:
        """
        Persist a new content item exactly as given.

        Raises:
            DuplicateSlugError: If the content type already has an item with this slug
        """
        async with unit_of_work(self.session):
            existing = await self.repo.get_by_content_type_and_slug(
                candidate.content_type_id,
                candidate.slug,
            )
            if existing is not None:
                raise DuplicateSlugError(candidate.slug)

            content = await self.repo.save(candidate)

        logger.info(
            "Content created",
            content_id=content.id,
            content_type_id=content.content_type_id,
            slug=content.slug,
        )
        return content

    async def publish_content(self, content_id: int) -> Content:
        """
        Publish a content item.

        Raises:
            ContentNotFoundError: If no content has this id
            EmptyContentError: If content_data is empty or whitespace only
        """
        async with unit_of_work(self.session):
            content = await self.repo.get(content_id)
            if content is None:
                raise ContentNotFoundError(content_id)

            if not content.content_data or not content.content_data.strip():
                raise EmptyContentError(content_id)

            published = content.copy_with(
                status=ContentStatus.PUBLISHED,
                publish_date=datetime.now(timezone.utc),
            )
            published = await self.repo.save(published)

        logger.info("Content published", content_id=published.id)
        return published

    async def find_by_id(self, content_id: int) -> Optional[Content]:
        return await self.repo.get(content_id)

    async def find_published_by_type(self, content_type_id: int) -> list[Content]:
        """Published items of a content type, newest first."""
        return await self.repo.find_published_by_type(content_type_id)

    async def search(self, term: str, case_sensitive: bool = False) -> list[Content]:
        return await self.repo.search_content_data(term, case_sensitive=case_sensitive)
