"""
Authentication Handler

Handles the login endpoint. Registration lives on POST /api/users.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

AuthenticationError raised by the service is rendered as 401 by the
global exception handler.
"""

from datetime import timedelta

from fastapi import APIRouter, Depends

from cms.config.settings import settings
from cms.shared.schemas.user import LoginRequest, TokenResponse, UserResponse
from cms.shared.services.user_service import UserService
from cms.shared.utils.security import SecurityUtils
from cms.api.dependencies.services import get_user_service


router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: LoginRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid or the account is inactive
    """
    user = await user_service.authenticate(credentials.username, credentials.password)

    access_token = SecurityUtils.create_access_token(
        data={"sub": str(user.id), "username": user.username, "role": user.role.value},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )

    return TokenResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
