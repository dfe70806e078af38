"""
User Handler

Registration and lookup endpoints for users.

Absent users are reported as 404 rather than a null body.
"""

from fastapi import APIRouter, Depends, status

from cms.shared.core.exceptions import UserNotFoundError
from cms.shared.schemas.common import PaginatedResponse, PaginationMeta, PaginationParams
from cms.shared.schemas.user import UserCreate, UserResponse
from cms.shared.services.user_service import UserService
from cms.api.dependencies.pagination import get_pagination
from cms.api.dependencies.services import get_user_service


router = APIRouter()


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    pagination: PaginationParams = Depends(get_pagination),
    user_service: UserService = Depends(get_user_service),
):
    """List users, newest first."""
    users = await user_service.list_users(offset=pagination.offset, limit=pagination.limit)
    total = await user_service.count_users()

    return PaginatedResponse[UserResponse](
        data=[UserResponse.model_validate(user) for user in users],
        pagination=PaginationMeta.create(
            page=pagination.page,
            per_page=pagination.per_page,
            total=total,
        ),
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user.

    Raises:
        409: If the username or email is already registered
    """
    return await user_service.create_user(user_data.to_entity())


@router.get("/username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.find_by_username(username)
    if user is None:
        raise UserNotFoundError(username)
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
