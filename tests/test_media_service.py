"""Tests for MediaService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cms.shared.core.exceptions import DuplicateFilePathError
from cms.shared.models import Media
from cms.shared.repositories import MediaRepository
from cms.shared.services import MediaService


def _media(file_path: str = "uploads/hero.jpg", mime_type: str = "image/jpeg", **overrides) -> Media:
    values = dict(
        filename=file_path.rsplit("/", 1)[-1],
        file_path=file_path,
        mime_type=mime_type,
        file_size=1024,
        uploader_id=1,
    )
    values.update(overrides)
    return Media(**values)


async def test_duplicate_file_path_rejected():
    repo = AsyncMock(spec=MediaRepository)
    repo.get_by_file_path.return_value = _media(id=1)
    session = MagicMock()
    session.in_transaction.return_value = True
    service = MediaService(session, repo=repo)

    with pytest.raises(DuplicateFilePathError) as exc_info:
        await service.upload_media(_media())

    assert exc_info.value.message == "FilePath 'uploads/hero.jpg' is already used"
    repo.save.assert_not_awaited()


async def test_upload_and_find(db_session, make_user):
    uploader = await make_user()
    service = MediaService(db_session)

    media = await service.upload_media(_media(uploader_id=uploader.id, tags="hero,banner"))

    assert media.id is not None
    assert (await service.find_by_id(media.id)).file_path == "uploads/hero.jpg"
    assert await service.find_by_id(0) is None
    assert [m.id for m in await service.find_by_uploader(uploader.id)] == [media.id]


async def test_mime_prefix_is_a_literal_prefix(db_session, make_user):
    uploader = await make_user()
    service = MediaService(db_session)
    for path, mime in (
        ("a.jpg", "image/jpeg"),
        ("b.png", "image/png"),
        ("c.bin", "application/image"),
        ("d.pdf", "application/pdf"),
    ):
        await service.upload_media(_media(file_path=path, mime_type=mime, uploader_id=uploader.id))

    images = await service.find_by_mime_type_starting_with("image/")

    assert sorted(m.mime_type for m in images) == ["image/jpeg", "image/png"]
    assert await service.find_by_mime_type_starting_with("image%") == []
    assert await service.find_by_mime_type_starting_with("im_ge/") == []
