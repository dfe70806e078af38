"""
Content Repository

Database operations specific to the Content model.

Query Catalogue:
================
    Exact match
        get_by_content_type_and_slug(ct, slug)   ct AND slug   (unique pair)
        find_by_content_type(ct)                 ct
        find_by_author(author)                   author
        find_by_status(status)                   status
        find_by_content_type_and_status          ct AND status
        find_by_author_and_status                author AND status
        find_by_content_type_and_author          ct AND author

    Ranges (datetime bounds)
        find_by_status_and_publish_date_before   status AND publish_date <  d
        find_by_status_and_publish_date_after    status AND publish_date >  d
        find_by_created_at_between(start, end)   start <= created_at <= end
        find_published_by_date(status, now)      status AND publish_date <= now

    Published listings (newest publish_date first)
        find_published_by_type(ct)               ct AND status = PUBLISHED
        find_all_published()                     PUBLISHED AND publish_date <= CURRENT_TIMESTAMP

    Substring
        search_content_data(term, case_sensitive)

Content type and author are addressed by id.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.repositories.base import BaseRepository
from cms.shared.models.content import Content
from cms.shared.models.enums import ContentStatus


class ContentRepository(BaseRepository[Content]):
    """Repository for Content database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Content, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXACT MATCH
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_content_type_and_slug(
        self,
        content_type_id: int,
        slug: str,
    ) -> Optional[Content]:
        """
        Get the content item holding a slug within a content type.

        SQL Generated:
            SELECT * FROM content WHERE content_type_id = 3 AND slug = 'hello-world'
        """
        return await self._one_or_none(
            select(Content).where(
                Content.content_type_id == content_type_id,
                Content.slug == slug,
            )
        )

    async def find_by_content_type(self, content_type_id: int) -> list[Content]:
        return await self._all(
            select(Content).where(Content.content_type_id == content_type_id).order_by(Content.id)
        )

    async def find_by_author(self, author_id: int) -> list[Content]:
        return await self._all(
            select(Content).where(Content.author_id == author_id).order_by(Content.id)
        )

    async def find_by_status(self, status: ContentStatus) -> list[Content]:
        return await self._all(select(Content).where(Content.status == status).order_by(Content.id))

    async def find_by_content_type_and_status(
        self,
        content_type_id: int,
        status: ContentStatus,
    ) -> list[Content]:
        return await self._all(
            select(Content)
            .where(Content.content_type_id == content_type_id, Content.status == status)
            .order_by(Content.id)
        )

    async def find_by_author_and_status(
        self,
        author_id: int,
        status: ContentStatus,
    ) -> list[Content]:
        return await self._all(
            select(Content)
            .where(Content.author_id == author_id, Content.status == status)
            .order_by(Content.id)
        )

    async def find_by_content_type_and_author(
        self,
        content_type_id: int,
        author_id: int,
    ) -> list[Content]:
        return await self._all(
            select(Content)
            .where(Content.content_type_id == content_type_id, Content.author_id == author_id)
            .order_by(Content.id)
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # RANGES
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_by_status_and_publish_date_before(
        self,
        status: ContentStatus,
        date: datetime,
    ) -> list[Content]:
        """Items in a status whose publish date is strictly before `date`."""
        return await self._all(
            select(Content)
            .where(Content.status == status, Content.publish_date < date)
            .order_by(Content.publish_date)
        )

    async def find_by_status_and_publish_date_after(
        self,
        status: ContentStatus,
        date: datetime,
    ) -> list[Content]:
        """Items in a status whose publish date is strictly after `date`."""
        return await self._all(
            select(Content)
            .where(Content.status == status, Content.publish_date > date)
            .order_by(Content.publish_date)
        )

    async def find_by_created_at_between(self, start: datetime, end: datetime) -> list[Content]:
        """Items created within [start, end], both bounds inclusive."""
        return await self._all(
            select(Content)
            .where(Content.created_at.between(start, end))
            .order_by(Content.created_at)
        )

    async def find_published_by_date(self, status: ContentStatus, now: datetime) -> list[Content]:
        """
        Items in a status whose publish date has been reached.

        SQL Generated:
            SELECT * FROM content WHERE status = 'PUBLISHED' AND publish_date <= :now
        """
        return await self._all(
            select(Content)
            .where(Content.status == status, Content.publish_date <= now)
            .order_by(Content.publish_date.desc())
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # PUBLISHED LISTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_published_by_type(self, content_type_id: int) -> list[Content]:
        """Published items of one content type, newest publish date first."""
        return await self._all(
            select(Content)
            .where(
                Content.content_type_id == content_type_id,
                Content.status == ContentStatus.PUBLISHED,
            )
            .order_by(Content.publish_date.desc())
        )

    async def find_all_published(self) -> list[Content]:
        """Published items whose publish date is not in the future, newest first."""
        return await self._all(
            select(Content)
            .where(
                Content.status == ContentStatus.PUBLISHED,
                Content.publish_date <= func.current_timestamp(),
            )
            .order_by(Content.publish_date.desc())
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # SUBSTRING SEARCH
    # ═══════════════════════════════════════════════════════════════════════════

    async def search_content_data(self, term: str, case_sensitive: bool = False) -> list[Content]:
        """
        Items whose raw content_data contains `term`.

        LIKE wildcards in the term are matched literally. SQLite LIKE ignores
        ASCII case, so the case-sensitive variant uses instr() there.

        SQL Generated:
            SELECT * FROM content WHERE lower(content_data) LIKE lower('%' || :term || '%')
            SELECT * FROM content WHERE instr(content_data, :term) > 0      -- sqlite, case_sensitive
        """
        if case_sensitive and self.session.get_bind().dialect.name == "sqlite":
            condition = func.instr(Content.content_data, term) > 0
        elif case_sensitive:
            condition = Content.content_data.contains(term, autoescape=True)
        else:
            condition = Content.content_data.icontains(term, autoescape=True)
        return await self._all(select(Content).where(condition).order_by(Content.id))
