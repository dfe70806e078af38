"""
ContentType Service

Business logic for content type definitions.

Usage:
======
    from cms.shared.services.content_type_service import ContentTypeService

    service = ContentTypeService(db)
    blog = await service.create_content_type(candidate)
    blog = await service.deactivate_content_type(blog.id)
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.core.exceptions import (
    ContentTypeNotFoundError,
    DuplicateApiIdentifierError,
    DuplicateNameError,
)
from cms.shared.core.logging import get_logger
from cms.shared.db.session import unit_of_work
from cms.shared.models.content_type import ContentType
from cms.shared.repositories.content_type_repository import ContentTypeRepository


logger = get_logger("cms.services.content_type")


class ContentTypeService:
    """
    Service for content type business logic.

    Handles:
    - Defining new content types (unique name and api identifier)
    - Lookup by API identifier
    - Deactivation (does not touch content of that type)
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: Optional[ContentTypeRepository] = None,
    ) -> None:
        self.session = session
        self.repo = repo if repo is not None else ContentTypeRepository(session)

    async def create_content_type(self, candidate: ContentType) -> ContentType:
        """
        Persist a new content type exactly as given.

        Raises:
            DuplicateNameError: If the name is taken
            DuplicateApiIdentifierError: If the name is free but the api identifier is taken
        """
        async with unit_of_work(self.session):
            if await self.repo.get_by_name(candidate.name) is not None:
                raise DuplicateNameError(candidate.name)

            if await self.repo.get_by_api_identifier(candidate.api_identifier) is not None:
                raise DuplicateApiIdentifierError(candidate.api_identifier)

            content_type = await self.repo.save(candidate)

        logger.info(
            "Content type created",
            content_type_id=content_type.id,
            api_identifier=content_type.api_identifier,
        )
        return content_type

    async def find_by_api_identifier(self, api_identifier: str) -> Optional[ContentType]:
        return await self.repo.get_by_api_identifier(api_identifier)

    async def find_by_id(self, content_type_id: int) -> Optional[ContentType]:
        return await self.repo.get(content_type_id)

    async def list_active(self) -> list[ContentType]:
        return await self.repo.find_active()

    async def deactivate_content_type(self, content_type_id: int) -> ContentType:
        """
        Mark a content type inactive.

        Every other field, including version, is carried over unchanged.

        Raises:
            ContentTypeNotFoundError: If no content type has this id
        """
        async with unit_of_work(self.session):
            content_type = await self.repo.get(content_type_id)
            if content_type is None:
                raise ContentTypeNotFoundError(content_type_id)

            content_type = await self.repo.save(content_type.copy_with(active=False))

        logger.info("Content type deactivated", content_type_id=content_type.id)
        return content_type
