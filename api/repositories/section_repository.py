"""Repository for section operations."""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.engine import RowMapping

from models import ProductBatch, Section
from repositories.base import CrudRepository
from repositories.utils import log_slow_query


class SectionRepository(CrudRepository[Section]):
    model = Section
    resource = "section"
    unique_field = "section_number"

    @log_slow_query("sections.products_report")
    async def products_report(
        self, section_id: int | None = None
    ) -> Sequence[RowMapping]:
        """Sum current product quantity over each section's batches.

        Sections without batches are omitted.
        """
        query = (
            select(
                Section.id.label("section_id"),
                Section.section_number,
                func.sum(ProductBatch.current_quantity).label("products_count"),
            )
            .join(ProductBatch, ProductBatch.section_id == Section.id)
            .group_by(Section.id, Section.section_number)
            .order_by(Section.id)
        )
        if section_id is not None:
            query = query.where(Section.id == section_id)

        result = await self.db.execute(query)
        return result.mappings().all()
