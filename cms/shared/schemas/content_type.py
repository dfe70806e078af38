"""
ContentType-related Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.content_type import ContentType
from .common import BaseSchema


class ContentTypeCreate(BaseModel):
    """
    Request to define a new content type.

    field_definitions is JSON text of the shape
    {"fields": [{"name", "type", "required", "validations"}]}. It is stored
    as given; only blankness is rejected here.
    """

    name: str = Field(min_length=2, max_length=100)
    api_identifier: str = Field(
        min_length=2,
        max_length=100,
        pattern=r"^[a-z][a-z0-9_]*[a-z0-9]$",
        description="Lowercase snake_case key, e.g. blog_post",
    )
    description: Optional[str] = Field(None, max_length=500)
    field_definitions: str = Field(min_length=1)

    @field_validator("field_definitions")
    @classmethod
    def field_definitions_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field_definitions must not be blank")
        return value

    def to_entity(self, user_id: int) -> ContentType:
        """Build an unsaved ContentType stamped with its creator."""
        return ContentType(
            name=self.name,
            api_identifier=self.api_identifier,
            description=self.description,
            field_definitions=self.field_definitions,
            active=True,
            version=1,
            created_by_id=user_id,
            updated_by_id=user_id,
        )


class ContentTypeResponse(BaseSchema):
    """Response for a content type."""

    id: int
    name: str
    api_identifier: str
    description: Optional[str] = None
    field_definitions: str
    active: bool
    version: int
    created_by_id: int
    updated_by_id: int
    created_at: datetime
    updated_at: datetime
