"""
Content Handler

Endpoints for creating, publishing and reading content items.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer.
"""

from fastapi import APIRouter, Depends, Query, status

from cms.shared.core.exceptions import ContentNotFoundError
from cms.shared.schemas.content import ContentCreate, ContentResponse
from cms.shared.services.content_service import ContentService
from cms.api.dependencies import CurrentUser
from cms.api.dependencies.services import get_content_service


router = APIRouter()


@router.post(
    "",
    response_model=ContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_content(
    data: ContentCreate,
    current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Create a content item authored by the caller.

    Raises:
        409: If the slug is already used within the content type
    """
    candidate = data.to_entity(author_id=current_user["user_id"])
    return await content_service.create_content(candidate)


@router.get("/search", response_model=list[ContentResponse])
async def search_content(
    q: str = Query(..., min_length=1, description="Substring to look for in content_data"),
    case_sensitive: bool = Query(False),
    content_service: ContentService = Depends(get_content_service),
):
    return await content_service.search(q, case_sensitive=case_sensitive)


@router.get("/published/{content_type_id}", response_model=list[ContentResponse])
async def list_published_by_type(
    content_type_id: int,
    content_service: ContentService = Depends(get_content_service),
):
    """Published items of a content type, newest publish date first."""
    return await content_service.find_published_by_type(content_type_id)


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: int,
    content_service: ContentService = Depends(get_content_service),
):
    content = await content_service.find_by_id(content_id)
    if content is None:
        raise ContentNotFoundError(content_id)
    return content


@router.post("/{content_id}/publish", response_model=ContentResponse)
async def publish_content(
    content_id: int,
    _current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Publish a content item now.

    Raises:
        400: If content_data is blank
        404: If the content does not exist
    """
    return await content_service.publish_content(content_id)
