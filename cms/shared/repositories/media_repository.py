"""
Media Repository

Database operations specific to the Media model.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.repositories.base import BaseRepository
from cms.shared.models.media import Media


class MediaRepository(BaseRepository[Media]):
    """
    Repository for Media database operations.

    Provides:
    - file path lookup (the unique storage key)
    - uploader, mime-type prefix, tag and size queries
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Media, session)

    async def get_by_file_path(self, file_path: str) -> Optional[Media]:
        """
        Get media by its storage path.

        SQL Generated:
            SELECT * FROM media WHERE file_path = 'uploads/hero.jpg'
        """
        return await self._one_or_none(select(Media).where(Media.file_path == file_path))

    async def find_by_uploader(self, uploader_id: int) -> list[Media]:
        return await self._all(select(Media).where(Media.uploader_id == uploader_id).order_by(Media.id))

    async def find_by_uploader_newest_first(self, uploader_id: int) -> list[Media]:
        return await self._all(
            select(Media)
            .where(Media.uploader_id == uploader_id)
            .order_by(Media.created_at.desc(), Media.id.desc())
        )

    async def find_by_mime_type_starting_with(self, prefix: str) -> list[Media]:
        """
        Media whose mime type begins with `prefix`.

        "image/" matches "image/jpeg" and "image/png" but not
        "application/image". LIKE wildcards in the prefix are escaped.

        SQL Generated:
            SELECT * FROM media WHERE mime_type LIKE 'image/%' ESCAPE '/'
        """
        return await self._all(
            select(Media)
            .where(Media.mime_type.startswith(prefix, autoescape=True))
            .order_by(Media.id)
        )

    async def find_by_mime_type_pattern(self, pattern: str) -> list[Media]:
        """
        Media whose mime type matches a caller-supplied LIKE pattern prefix.

        Unlike find_by_mime_type_starting_with, `%` and `_` in the pattern
        act as wildcards: "image/%png" matches "image/png" and "image/apng",
        "_ideo/" matches "video/mp4".

        SQL Generated:
            SELECT * FROM media WHERE mime_type LIKE :pattern || '%'
        """
        return await self._all(
            select(Media).where(Media.mime_type.like(pattern + "%")).order_by(Media.id)
        )

    async def find_by_created_at_between(self, start: datetime, end: datetime) -> list[Media]:
        """Media created within [start, end], both bounds inclusive."""
        return await self._all(
            select(Media).where(Media.created_at.between(start, end)).order_by(Media.created_at)
        )

    async def find_by_tag(self, tag: str) -> list[Media]:
        """Media whose free-text tags contain `tag` as a substring."""
        return await self._all(
            select(Media).where(Media.tags.contains(tag, autoescape=True)).order_by(Media.id)
        )

    async def find_by_file_size_between(self, min_size: int, max_size: int) -> list[Media]:
        """Media strictly larger than min_size and strictly smaller than max_size."""
        return await self._all(
            select(Media)
            .where(Media.file_size > min_size, Media.file_size < max_size)
            .order_by(Media.file_size)
        )
