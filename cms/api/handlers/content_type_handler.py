"""
Content Type Handler

Endpoints for defining, looking up and deactivating content types.
"""

from fastapi import APIRouter, Depends, status

from cms.shared.core.exceptions import ContentTypeNotFoundError
from cms.shared.schemas.content_type import ContentTypeCreate, ContentTypeResponse
from cms.shared.services.content_type_service import ContentTypeService
from cms.api.dependencies import CurrentUser, EditorUser
from cms.api.dependencies.services import get_content_type_service


router = APIRouter()


@router.post(
    "",
    response_model=ContentTypeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_content_type(
    data: ContentTypeCreate,
    current_user: CurrentUser,
    content_type_service: ContentTypeService = Depends(get_content_type_service),
):
    """
    Define a new content type owned by the caller.

    Raises:
        409: If the name or api identifier is already used
    """
    candidate = data.to_entity(user_id=current_user["user_id"])
    return await content_type_service.create_content_type(candidate)


@router.get("", response_model=list[ContentTypeResponse])
async def list_active_content_types(
    content_type_service: ContentTypeService = Depends(get_content_type_service),
):
    return await content_type_service.list_active()


@router.get("/api/{api_identifier}", response_model=ContentTypeResponse)
async def get_content_type_by_api_identifier(
    api_identifier: str,
    content_type_service: ContentTypeService = Depends(get_content_type_service),
):
    content_type = await content_type_service.find_by_api_identifier(api_identifier)
    if content_type is None:
        raise ContentTypeNotFoundError(api_identifier)
    return content_type


@router.get("/{content_type_id}", response_model=ContentTypeResponse)
async def get_content_type(
    content_type_id: int,
    content_type_service: ContentTypeService = Depends(get_content_type_service),
):
    content_type = await content_type_service.find_by_id(content_type_id)
    if content_type is None:
        raise ContentTypeNotFoundError(content_type_id)
    return content_type


@router.post("/{content_type_id}/deactivate", response_model=ContentTypeResponse)
async def deactivate_content_type(
    content_type_id: int,
    _editor: EditorUser,
    content_type_service: ContentTypeService = Depends(get_content_type_service),
):
    """
    Deactivate a content type. Content of that type is left as is.

    Raises:
        403: If the caller is not an editor or admin
        404: If the content type does not exist
    """
    return await content_type_service.deactivate_content_type(content_type_id)
