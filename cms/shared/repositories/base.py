"""
Base Repository

Generic persistence port shared by every entity repository.

What This Provides:
===================
- get(id)        → Fetch single record by integer id (None when absent)
- get_by_ids()   → Fetch multiple records by ids
- exists()       → Check if record exists
- count()        → Count records with equality filters
- list()         → List records with pagination, filtering and ordering
- create()       → Insert a new record from field values
- save()         → Insert-or-update an entity by identity (merge)
- update()       → Update fields of an existing record in place
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(User, session)

    user = await UserRepository(db).get(42)   # Optional[User]

Write Flow:
===========
┌─────────────────────────────────────────────────────────────────────────────┐
│   save(entity):                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │ merged = await session.merge(entity)  # id None → INSERT    │          │
│   │                                       # id set  → UPDATE    │          │
│   │ await session.flush()                 # send SQL            │          │
│   │ await session.refresh(merged)         # load id, timestamps │          │
│   │ return merged                                               │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
│   IntegrityError during flush → PersistenceConflictError (409)              │
└─────────────────────────────────────────────────────────────────────────────┘

flush() vs commit():
====================
Repositories only flush. Committing belongs to whoever owns the
transaction: unit_of_work() in the service layer or get_db() per request.
"""

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from cms.shared.core.exceptions import PersistenceConflictError
from cms.shared.core.logging import get_logger
from cms.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)

log = get_logger("cms.repositories")


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERY HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _all(self, query: Select) -> list[ModelType]:
        """Execute a SELECT and return every row as a model instance."""
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def _one_or_none(self, query: Select) -> Optional[ModelType]:
        """Execute a SELECT expected to match at most one row."""
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def _flush(self) -> None:
        """Flush pending changes, translating constraint violations."""
        try:
            await self.session.flush()
        except IntegrityError as exc:
            table = self.model.__tablename__
            log.warning("Constraint violated on write", table=table, error=str(exc.orig))
            raise PersistenceConflictError(table, reason=str(exc.orig)) from exc

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by id.

        Unknown ids, including 0 and negative values, return None.

        SQL Generated:
            SELECT * FROM users WHERE id = 42
        """
        return await self._one_or_none(select(self.model).where(self.model.id == record_id))

    async def get_by_ids(self, ids: Sequence[int]) -> list[ModelType]:
        """
        Get multiple records by id in one query.

        Returns fewer records than requested when some ids are unknown.

        SQL Generated:
            SELECT * FROM users WHERE id IN (1, 2, 3)
        """
        if not ids:
            return []
        return await self._all(select(self.model).where(self.model.id.in_(ids)))

    async def exists(self, record_id: int) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records, optionally restricted by field=value filters.

        SQL Generated:
            SELECT COUNT(*) FROM users WHERE active = true
        """
        query = select(sql_count()).select_from(self.model)
        for field, value in (filters or {}).items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new record built from field values.

        Example:
            media = await repo.create(filename="a.png", file_path="u/a.png", ...)
            media.id          # generated by the database
            media.created_at  # set by the database

        Raises:
            PersistenceConflictError: If a unique or foreign key constraint fails
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self._flush()
        await self.session.refresh(instance)
        return instance

    async def save(self, instance: ModelType) -> ModelType:
        """
        Insert or update an entity by identity.

        An instance without an id is inserted. An instance carrying an id
        (typically a copy_with() copy of a loaded row) is merged onto the
        persistent row with that id and its changed columns are updated.

        Returns:
            The persistent instance, refreshed with database-set values

        Raises:
            PersistenceConflictError: If a unique or foreign key constraint fails
        """
        merged = await self.session.merge(instance)
        await self._flush()
        await self.session.refresh(merged)
        return merged

    async def update(self, record_id: int, **kwargs: Any) -> Optional[ModelType]:
        """
        Update fields of a record in place.

        None values are skipped to allow partial updates.

        Returns:
            Updated instance, or None if the id is unknown
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self._flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, record_id: int) -> bool:
        """
        Hard delete a record.

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self._flush()
        return True

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTING
    # ═══════════════════════════════════════════════════════════════════════════

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> Sequence[ModelType]:
        """
        List records with pagination and optional filtering.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return
            filters: Dict of field=value for WHERE clauses (unknown fields ignored)
            order_by: Field name to order results by (default: id)
            order_desc: If True, order descending; if False, ascending

        SQL Generated:
            SELECT * FROM users ORDER BY created_at DESC OFFSET 20 LIMIT 20
        """
        query = select(self.model)

        for field, value in (filters or {}).items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        order_field = getattr(self.model, order_by) if order_by and hasattr(self.model, order_by) else self.model.id
        query = query.order_by(order_field.desc() if order_desc else order_field.asc())

        query = query.offset(offset).limit(limit)
        return await self._all(query)
