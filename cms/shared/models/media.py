"""
Media Entity Model

Bookkeeping record for an uploaded asset. Only the path and metadata live
here; the bytes themselves are stored elsewhere under file_path.

SAMPLE MEDIA RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 9                                                         │
│ filename         │ "hero.jpg"                                                │
│ file_path        │ "uploads/2024/01/hero.jpg"  (unique storage key)          │
│ mime_type        │ "image/jpeg"                                              │
│ file_size        │ 204800                                                    │
│ uploader_id      │ 42                                                        │
│ tags             │ "landing,hero"                                            │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cms.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from cms.shared.models.user import User


class Media(Base, TimestampMixin):
    """
    Media model.

    Attributes:
        id: Generated integer key
        filename: Original file name
        file_path: Unique storage key
        mime_type: e.g. "image/jpeg"
        file_size: Size in bytes, never negative
        uploader_id: User who uploaded the file
        alt_text, title, description, tags: Optional descriptive fields
        metadata_: Optional JSON text (column "metadata")
    """

    __tablename__ = "media"

    __table_args__ = (
        CheckConstraint("file_size >= 0", name="ck_media_file_size_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    filename: Mapped[str] = mapped_column(String(255), nullable=False)

    file_path: Mapped[str] = mapped_column(String(500), unique=True, nullable=False)

    mime_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)

    uploader_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    alt_text: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    title: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    tags: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    metadata_: Mapped[Optional[str]] = mapped_column("metadata", Text, nullable=True)

    uploader: Mapped["User"] = relationship("User")

    def __repr__(self) -> str:
        return (
            f"<Media(id={self.id}, filename={self.filename}, file_path={self.file_path}, "
            f"mime_type={self.mime_type}, file_size={self.file_size})>"
        )
