"""Tests for ContentService."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from cms.shared.core.exceptions import (
    ContentNotFoundError,
    DuplicateSlugError,
    EmptyContentError,
)
from cms.shared.models import Content, ContentStatus
from cms.shared.repositories import ContentRepository
from cms.shared.services import ContentService


@pytest.fixture
def repo():
    return AsyncMock(spec=ContentRepository)


@pytest.fixture
def service(repo):
    session = MagicMock()
    session.in_transaction.return_value = True
    return ContentService(session, repo=repo)


def _content(**overrides) -> Content:
    values = dict(
        content_type_id=3,
        author_id=1,
        slug="hello-world",
        content_data='{"title": "Hello"}',
        status=ContentStatus.DRAFT,
        version=1,
    )
    values.update(overrides)
    return Content(**values)


# ═══════════════════════════════════════════════════════════════════════════════
# create_content
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_content_saves_candidate(service, repo):
    repo.get_by_content_type_and_slug.return_value = None
    repo.save.side_effect = lambda entity: entity
    candidate = _content()

    created = await service.create_content(candidate)

    repo.get_by_content_type_and_slug.assert_awaited_once_with(3, "hello-world")
    repo.save.assert_awaited_once_with(candidate)
    assert created.status == ContentStatus.DRAFT


async def test_duplicate_slug_performs_no_write(service, repo):
    repo.get_by_content_type_and_slug.return_value = _content(id=1)

    with pytest.raises(DuplicateSlugError) as exc_info:
        await service.create_content(_content())

    assert exc_info.value.message == "Slug 'hello-world' is already used"
    assert exc_info.value.details == {"field": "slug", "value": "hello-world"}
    repo.save.assert_not_awaited()


# ═══════════════════════════════════════════════════════════════════════════════
# publish_content
# ═══════════════════════════════════════════════════════════════════════════════


async def test_publish_unknown_raises_not_found(service, repo):
    repo.get.return_value = None

    with pytest.raises(ContentNotFoundError):
        await service.publish_content(77)


@pytest.mark.parametrize("blank", ["", "   ", "\n\t "])
async def test_publish_blank_content_rejected(service, repo, blank):
    original = _content(id=5, content_data=blank)
    repo.get.return_value = original

    with pytest.raises(EmptyContentError):
        await service.publish_content(5)

    assert original.status == ContentStatus.DRAFT
    repo.save.assert_not_awaited()


async def test_publish_sets_status_and_publish_date(service, repo):
    original = _content(id=5)
    repo.get.return_value = original
    repo.save.side_effect = lambda entity: entity
    before = datetime.now(timezone.utc)

    published = await service.publish_content(5)

    assert published.status == ContentStatus.PUBLISHED
    assert before <= published.publish_date <= datetime.now(timezone.utc)
    assert published.slug == original.slug
    assert original.status == ContentStatus.DRAFT


@pytest.mark.parametrize("status", [ContentStatus.PUBLISHED, ContentStatus.ARCHIVED])
async def test_republishing_is_allowed(service, repo, status):
    repo.get.return_value = _content(id=5, status=status)
    repo.save.side_effect = lambda entity: entity

    published = await service.publish_content(5)

    assert published.status == ContentStatus.PUBLISHED


# ═══════════════════════════════════════════════════════════════════════════════
# against the database
# ═══════════════════════════════════════════════════════════════════════════════


async def test_slug_unique_per_content_type(db_session, make_user, make_content_type):
    author = await make_user()
    blog = await make_content_type(author)
    news = await make_content_type(author, name="News", api_identifier="news_article")
    service = ContentService(db_session)

    await service.create_content(_content(content_type_id=blog.id, author_id=author.id))
    await service.create_content(_content(content_type_id=news.id, author_id=author.id))

    with pytest.raises(DuplicateSlugError):
        await service.create_content(_content(content_type_id=blog.id, author_id=author.id))

    assert len(await ContentRepository(db_session).find_by_content_type(blog.id)) == 1


async def test_publish_against_database(db_session, make_user, make_content_type):
    author = await make_user()
    blog = await make_content_type(author)
    service = ContentService(db_session)
    draft = await service.create_content(_content(content_type_id=blog.id, author_id=author.id))

    published = await service.publish_content(draft.id)

    assert published.id == draft.id
    assert published.status == ContentStatus.PUBLISHED
    assert published.publish_date is not None
    listed = await service.find_published_by_type(blog.id)
    assert [item.id for item in listed] == [draft.id]


async def test_publish_blank_against_database_leaves_draft(db_session, make_user, make_content_type):
    author = await make_user()
    blog = await make_content_type(author)
    service = ContentService(db_session)
    draft = await service.create_content(
        _content(content_type_id=blog.id, author_id=author.id, content_data="  ")
    )

    with pytest.raises(EmptyContentError):
        await service.publish_content(draft.id)

    reloaded = await service.find_by_id(draft.id)
    assert reloaded.status == ContentStatus.DRAFT
    assert reloaded.publish_date is None


async def test_published_by_type_newest_first(db_session, make_user, make_content_type):
    author = await make_user()
    blog = await make_content_type(author)
    service = ContentService(db_session)
    now = datetime.now(timezone.utc)
    for slug, age in (("old", 3), ("newest", 1), ("middle", 2)):
        await service.create_content(
            _content(
                content_type_id=blog.id,
                author_id=author.id,
                slug=slug,
                status=ContentStatus.PUBLISHED,
                publish_date=now - timedelta(days=age),
            )
        )
    await service.create_content(
        _content(content_type_id=blog.id, author_id=author.id, slug="draft")
    )

    listed = await service.find_published_by_type(blog.id)

    assert [item.slug for item in listed] == ["newest", "middle", "old"]
