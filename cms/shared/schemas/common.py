"""
Schemas shared by every resource: the ORM-friendly base, page
arithmetic, and the envelopes for list, error and health responses.

    PaginatedResponse[UserResponse](
        data=users,
        pagination=PaginationMeta.create(page=2, per_page=20, total=45),
    )
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from cms.config.settings import settings

ItemT = TypeVar("ItemT")


class BaseSchema(BaseModel):
    """Response models are built straight from ORM instances."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    total: int = Field(description="Rows matching the query across all pages")
    total_pages: int

    @classmethod
    def create(cls, page: int, per_page: int, total: int) -> "PaginationMeta":
        # ceil(total / per_page) without floats; an empty result has zero pages
        pages = -(-total // per_page) if per_page > 0 else 0
        return cls(page=page, per_page=per_page, total=total, total_pages=pages)


class PaginatedResponse(BaseModel, Generic[ItemT]):
    data: list[ItemT]
    pagination: PaginationMeta


# ═══════════════════════════════════════════════════════════════════════════════
# ENVELOPES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    code: str = Field(description="Stable machine-readable code, e.g. DUPLICATE_SLUG")
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """
    Body of every non-2xx response.

        {"error": {"code": "DUPLICATE_SLUG",
                   "message": "Slug 'hello-world' is already used",
                   "details": {"field": "slug", "value": "hello-world"}}}
    """

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = settings.APP_NAME
    version: str = settings.APP_VERSION
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
