"""Generic CRUD repository shared by every resource table."""

from collections.abc import Sequence
from typing import Any, ClassVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import Base
from repositories.utils import log_slow_query


class CrudRepository[ModelT: Base]:
    """Record-level CRUD for one table keyed by an integer ``id``.

    Subclasses set ``model``, a short ``resource`` name used in log events,
    and ``unique_field`` when the table has a natural uniqueness key.

    Calls flush() but does NOT commit; the request's session dependency
    owns the transaction.
    """

    model: ClassVar[type[Any]]
    resource: ClassVar[str]
    unique_field: ClassVar[str | None] = None

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @log_slow_query("crud.list_all")
    async def list_all(self) -> Sequence[ModelT]:
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        return result.scalars().all()

    @log_slow_query("crud.get_by_id")
    async def get_by_id(self, record_id: int) -> ModelT | None:
        result = await self.db.execute(
            select(self.model).where(self.model.id == record_id)
        )
        return result.scalar_one_or_none()

    @log_slow_query("crud.exists")
    async def exists(self, record_id: int) -> bool:
        """Existence probe used by reference checks on dependent records."""
        result = await self.db.execute(
            select(self.model.id).where(self.model.id == record_id)
        )
        return result.scalar_one_or_none() is not None

    @log_slow_query("crud.exists_by_unique_key")
    async def exists_by_unique_key(
        self, key: Any, *, exclude_id: int | None = None
    ) -> bool:
        if self.unique_field is None:
            return False
        column = getattr(self.model, self.unique_field)
        query = select(self.model.id).where(column == key)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    @log_slow_query("crud.insert")
    async def insert(self, values: dict[str, Any]) -> int:
        """Insert a row and return the id the store assigned to it."""
        record = self.model(**values)
        self.db.add(record)
        await self.db.flush()
        return record.id

    @log_slow_query("crud.update_by_id")
    async def update_by_id(self, record_id: int, values: dict[str, Any]) -> int:
        """Overwrite the row's columns with ``values``. Returns rows affected."""
        result = await self.db.execute(
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    @log_slow_query("crud.delete_by_id")
    async def delete_by_id(self, record_id: int) -> int:
        """Physically delete the row. Returns rows affected."""
        result = await self.db.execute(
            delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount
