"""
Content Entity Model

One instance of a ContentType: a JSON payload plus editorial state.

SAMPLE CONTENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 17                                                        │
│ content_type_id  │ 3   (blog_post)                                           │
│ author_id        │ 42                                                        │
│ status           │ PUBLISHED                                                 │
│ content_data     │ '{"title": "Hello", "body": "..."}'                       │
│ slug             │ "hello-world"                                             │
│ version          │ 1                                                         │
│ publish_date     │ 2024-01-15T10:30:00Z                                      │
│ metadata         │ '{"seo": {"description": "..."}}'                         │
└──────────────────────────────────────────────────────────────────────────────┘

Uniqueness:
===========
A slug is unique within its content type, not globally:
    (blog_post, "hello-world") and (news_article, "hello-world") may coexist.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cms.shared.models.base import Base, TimestampMixin
from cms.shared.models.enums import ContentStatus


if TYPE_CHECKING:
    from cms.shared.models.content_type import ContentType
    from cms.shared.models.user import User


class Content(Base, TimestampMixin):
    """
    Content model.

    Attributes:
        id: Generated integer key
        content_type_id: Schema this content instantiates
        author_id: User who wrote it
        status: ContentStatus, DRAFT unless specified
        content_data: JSON text; shape implied by the content type, never checked
        slug: Lowercase kebab-case key, unique per content type
        version: Starts at 1
        publish_date: Set when published
        metadata_: Optional JSON text (column "metadata"; the attribute name
            avoids clashing with Base.metadata)
        published_at / archived_at: Optional bookkeeping timestamps
    """

    __tablename__ = "content"

    __table_args__ = (
        UniqueConstraint("content_type_id", "slug", name="uk_content_type_slug"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    content_type_id: Mapped[int] = mapped_column(
        ForeignKey("content_types.id"),
        nullable=False,
        index=True,
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EDITORIAL STATE
    # ═══════════════════════════════════════════════════════════════════════════

    status: Mapped[ContentStatus] = mapped_column(
        Enum(ContentStatus, name="content_status", native_enum=False, length=20),
        nullable=False,
        default=ContentStatus.DRAFT,
        index=True,
    )

    content_data: Mapped[str] = mapped_column(Text, nullable=False)

    slug: Mapped[str] = mapped_column(String(200), nullable=False)

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    publish_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    metadata_: Mapped[Optional[str]] = mapped_column("metadata", Text, nullable=True)

    published_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    archived_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    content_type: Mapped["ContentType"] = relationship("ContentType")

    author: Mapped["User"] = relationship("User")

    def __repr__(self) -> str:
        return (
            f"<Content(id={self.id}, slug={self.slug}, status={self.status}, "
            f"version={self.version}, publish_date={self.publish_date})>"
        )
