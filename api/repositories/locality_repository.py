"""Repository for locality operations."""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.engine import RowMapping

from models import Locality, Seller
from repositories.base import CrudRepository
from repositories.utils import log_slow_query


class LocalityRepository(CrudRepository[Locality]):
    model = Locality
    resource = "locality"
    unique_field = "locality_name"

    @log_slow_query("localities.sellers_report")
    async def sellers_report(
        self, locality_id: int | None = None
    ) -> Sequence[RowMapping]:
        """Count sellers per locality. Localities without sellers are omitted."""
        query = (
            select(
                Locality.id.label("locality_id"),
                Locality.locality_name,
                func.count(Seller.id).label("sellers_count"),
            )
            .join(Seller, Seller.locality_id == Locality.id)
            .group_by(Locality.id, Locality.locality_name)
            .order_by(Locality.id)
        )
        if locality_id is not None:
            query = query.where(Locality.id == locality_id)

        result = await self.db.execute(query)
        return result.mappings().all()
