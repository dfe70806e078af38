"""
Base Model Classes

Declarative base and shared mixins for all CMS models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base + copy_with()
       │
       └── TimestampMixin   ← Server-set created_at / updated_at

Copy-With-Overrides:
====================
Status changes (publish, deactivate) never mutate a loaded entity in
place. The service builds a new instance carrying every mapped column of
the original plus the named overrides, then hands it to
repository.save(), which merges it by primary key:

    deactivated = content_type.copy_with(active=False)
    deactivated = await repo.save(deactivated)

Only column attributes are copied; relationships are left unloaded on the
copy so merge() never cascades into associated rows.
"""

from datetime import datetime, timezone
from typing import Any, TypeVar

from sqlalchemy import DateTime, inspect, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


SelfModel = TypeVar("SelfModel", bound="Base")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    def column_values(self) -> dict[str, Any]:
        """
        Values of the mapped columns that are set or loaded on this instance.

        Unset columns are left out so that a copy of a transient instance
        still picks up column defaults on INSERT.
        """
        state = inspect(self)
        return {
            attr.key: state.dict[attr.key]
            for attr in state.mapper.column_attrs
            if attr.key in state.dict
        }

    def copy_with(self: SelfModel, **overrides: Any) -> SelfModel:
        """
        Build a new instance of the same model with named fields replaced.

        Args:
            **overrides: Column attribute names and their new values

        Returns:
            A transient instance with the same primary key as self

        Raises:
            AttributeError: If an override does not name a mapped column
        """
        columns = {attr.key for attr in inspect(type(self)).column_attrs}
        unknown = set(overrides) - columns
        if unknown:
            raise AttributeError(
                f"{type(self).__name__} has no column(s): {', '.join(sorted(unknown))}"
            )
        values = self.column_values()
        values.update(overrides)
        return type(self)(**values)


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Database Behavior:
    ==================
    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
