"""
Media Service

Business logic for media metadata records.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.core.exceptions import DuplicateFilePathError
from cms.shared.core.logging import get_logger
from cms.shared.db.session import unit_of_work
from cms.shared.models.media import Media
from cms.shared.repositories.media_repository import MediaRepository


logger = get_logger("cms.services.media")


class MediaService:
    """Service for media business logic."""

    def __init__(
        self,
        session: AsyncSession,
        repo: Optional[MediaRepository] = None,
    ) -> None:
        self.session = session
        self.repo = repo if repo is not None else MediaRepository(session)

    async def upload_media(self, candidate: Media) -> Media:
        """
        Register an uploaded file.

        Raises:
            DuplicateFilePathError: If another record already uses the file path
        """
        async with unit_of_work(self.session):
            if await self.repo.get_by_file_path(candidate.file_path) is not None:
                raise DuplicateFilePathError(candidate.file_path)

            media = await self.repo.save(candidate)

        logger.info(
            "Media uploaded",
            media_id=media.id,
            mime_type=media.mime_type,
            file_size=media.file_size,
        )
        return media

    async def find_by_id(self, media_id: int) -> Optional[Media]:
        return await self.repo.get(media_id)

    async def find_by_uploader(self, uploader_id: int) -> list[Media]:
        return await self.repo.find_by_uploader(uploader_id)

    async def find_by_mime_type_starting_with(self, prefix: str) -> list[Media]:
        """Media whose mime type starts with `prefix`, wildcards matched literally."""
        return await self.repo.find_by_mime_type_starting_with(prefix)
