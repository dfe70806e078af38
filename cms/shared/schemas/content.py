"""
Content-related Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models.content import Content
from ..models.enums import ContentStatus
from .common import BaseSchema


class ContentCreate(BaseModel):
    """Request to create a content item (draft by default)."""

    content_type_id: int = Field(ge=1)
    slug: str = Field(
        min_length=1,
        max_length=200,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description="Lowercase kebab-case, unique within the content type",
    )
    content_data: str = Field(description="JSON payload, stored as given")
    status: ContentStatus = ContentStatus.DRAFT
    publish_date: Optional[datetime] = None
    metadata: Optional[str] = Field(None, description="Free-form JSON text")

    def to_entity(self, author_id: int) -> Content:
        """Build an unsaved Content authored by `author_id`."""
        return Content(
            content_type_id=self.content_type_id,
            author_id=author_id,
            slug=self.slug,
            content_data=self.content_data,
            status=self.status,
            publish_date=self.publish_date,
            version=1,
            metadata_=self.metadata,
        )


class ContentResponse(BaseSchema):
    """Response for a content item."""

    id: int
    content_type_id: int
    author_id: int
    slug: str
    status: ContentStatus
    content_data: str
    version: int
    publish_date: Optional[datetime] = None
    metadata: Optional[str] = Field(None, validation_alias="metadata_")
    created_at: datetime
    updated_at: datetime
