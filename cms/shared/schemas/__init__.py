"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, pagination, error responses
- user: User and authentication schemas
- content_type: Content type definition schemas
- content: Content item schemas
- media: Media metadata schemas

Usage:
======
    from cms.shared.schemas.user import UserCreate, UserResponse, TokenResponse
    from cms.shared.schemas.common import PaginatedResponse, ErrorResponse
"""

from cms.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    PaginationMeta,
    PaginatedResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from cms.shared.schemas.user import (
    UserCreate,
    UserResponse,
    LoginRequest,
    TokenResponse,
)
from cms.shared.schemas.content_type import ContentTypeCreate, ContentTypeResponse
from cms.shared.schemas.content import ContentCreate, ContentResponse
from cms.shared.schemas.media import MediaCreate, MediaResponse

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",
    # Content type
    "ContentTypeCreate",
    "ContentTypeResponse",
    # Content
    "ContentCreate",
    "ContentResponse",
    # Media
    "MediaCreate",
    "MediaResponse",
]
