"""
ContentType Entity Model

A named schema describing the shape of Content payloads.

SAMPLE CONTENT TYPE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                │ 3                                                        │
│ name              │ "Blog Post"                                              │
│ api_identifier    │ "blog_post"                                              │
│ description       │ "Long-form articles"                                     │
│ field_definitions │ '{"fields": [{"name": "title", "type": "text",           │
│                   │   "required": true, "validations": {}}]}'                │
│ active            │ true                                                     │
│ version           │ 1                                                        │
│ created_by_id     │ 42                                                       │
│ updated_by_id     │ 42                                                       │
└──────────────────────────────────────────────────────────────────────────────┘

field_definitions is stored as opaque JSON text. Nothing in the backend
parses it or validates Content against it.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cms.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from cms.shared.models.user import User


class ContentType(Base, TimestampMixin):
    """
    ContentType model.

    Attributes:
        id: Generated integer key
        name: Unique display name (2-100 chars)
        api_identifier: Unique lowercase snake_case key used by API clients
        description: Optional, up to 500 chars
        field_definitions: JSON text describing the fields of the schema
        active: False once deactivated; dependent content is untouched
        version: Schema version, starts at 1

    Relationships:
        created_by: User who created the type
        updated_by: User who last changed the type
    """

    __tablename__ = "content_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    api_identifier: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    field_definitions: Mapped[str] = mapped_column(Text, nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    created_by_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    updated_by_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    created_by: Mapped["User"] = relationship("User", foreign_keys=[created_by_id])

    updated_by: Mapped["User"] = relationship("User", foreign_keys=[updated_by_id])

    def __repr__(self) -> str:
        return (
            f"<ContentType(id={self.id}, name={self.name}, "
            f"api_identifier={self.api_identifier}, active={self.active}, version={self.version})>"
        )
