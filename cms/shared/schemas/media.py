"""
Media-related Pydantic schemas.

Only metadata about an uploaded file is handled here. The bytes live in
external storage addressed by file_path.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models.media import Media
from .common import BaseSchema


class MediaCreate(BaseModel):
    """Request to register an uploaded file."""

    filename: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1, max_length=500)
    mime_type: str = Field(min_length=1, max_length=100)
    file_size: int = Field(ge=0, description="Size in bytes")
    alt_text: Optional[str] = Field(None, max_length=255)
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    tags: Optional[str] = Field(None, max_length=500)
    metadata: Optional[str] = None

    def to_entity(self, uploader_id: int) -> Media:
        return Media(
            filename=self.filename,
            file_path=self.file_path,
            mime_type=self.mime_type,
            file_size=self.file_size,
            uploader_id=uploader_id,
            alt_text=self.alt_text,
            title=self.title,
            description=self.description,
            tags=self.tags,
            metadata_=self.metadata,
        )


class MediaResponse(BaseSchema):
    """Response for a media record."""

    id: int
    filename: str
    file_path: str
    mime_type: str
    file_size: int
    uploader_id: int
    alt_text: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    metadata: Optional[str] = Field(None, validation_alias="metadata_")
    created_at: datetime
    updated_at: datetime
