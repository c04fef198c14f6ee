"""Repository for carry operations."""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.engine import RowMapping

from models import Carry, Locality
from repositories.base import CrudRepository
from repositories.utils import log_slow_query


class CarryRepository(CrudRepository[Carry]):
    model = Carry
    resource = "carry"
    unique_field = "cid"

    @log_slow_query("carries.locality_report")
    async def locality_report(
        self, locality_id: int | None = None
    ) -> Sequence[RowMapping]:
        """Count carries per locality. Localities without carries are omitted."""
        query = (
            select(
                Locality.id.label("locality_id"),
                Locality.locality_name,
                func.count(Carry.id).label("carries_count"),
            )
            .join(Locality, Carry.locality_id == Locality.id)
            .group_by(Locality.id, Locality.locality_name)
            .order_by(Locality.id)
        )
        if locality_id is not None:
            query = query.where(Locality.id == locality_id)

        result = await self.db.execute(query)
        return result.mappings().all()
