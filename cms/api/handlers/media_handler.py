"""
Media Handler

Endpoints for registering uploaded files and querying their metadata.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from cms.shared.core.exceptions import MediaNotFoundError, ValidationError
from cms.shared.schemas.media import MediaCreate, MediaResponse
from cms.shared.services.media_service import MediaService
from cms.api.dependencies import CurrentUser
from cms.api.dependencies.services import get_media_service


router = APIRouter()


@router.post(
    "",
    response_model=MediaResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_media(
    data: MediaCreate,
    current_user: CurrentUser,
    media_service: MediaService = Depends(get_media_service),
):
    """
    Register an uploaded file for the caller.

    Raises:
        409: If the file path is already used
    """
    candidate = data.to_entity(uploader_id=current_user["user_id"])
    return await media_service.upload_media(candidate)


@router.get("", response_model=list[MediaResponse])
async def list_media(
    uploader_id: Optional[int] = Query(None, ge=1),
    mime_prefix: Optional[str] = Query(None, min_length=1),
    media_service: MediaService = Depends(get_media_service),
):
    """
    List media by uploader or by mime type prefix.

    Exactly one of uploader_id and mime_prefix must be given.
    """
    if (uploader_id is None) == (mime_prefix is None):
        raise ValidationError("Provide exactly one of uploader_id or mime_prefix")

    if uploader_id is not None:
        return await media_service.find_by_uploader(uploader_id)
    return await media_service.find_by_mime_type_starting_with(mime_prefix)


@router.get("/{media_id}", response_model=MediaResponse)
async def get_media(
    media_id: int,
    media_service: MediaService = Depends(get_media_service),
):
    media = await media_service.find_by_id(media_id)
    if media is None:
        raise MediaNotFoundError(media_id)
    return media
