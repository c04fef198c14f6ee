"""Repository for product operations."""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.engine import RowMapping

from models import Product, ProductRecord
from repositories.base import CrudRepository
from repositories.utils import log_slow_query


class ProductRepository(CrudRepository[Product]):
    model = Product
    resource = "product"
    unique_field = "product_code"

    @log_slow_query("products.records_report")
    async def records_report(
        self, product_id: int | None = None
    ) -> Sequence[RowMapping]:
        """Count product records per product.

        Outer join: a product without records is reported with a count of 0.
        """
        query = (
            select(
                Product.id.label("product_id"),
                Product.description,
                func.count(ProductRecord.id).label("records_count"),
            )
            .outerjoin(ProductRecord, ProductRecord.product_id == Product.id)
            .group_by(Product.id, Product.description)
            .order_by(Product.id)
        )
        if product_id is not None:
            query = query.where(Product.id == product_id)

        result = await self.db.execute(query)
        return result.mappings().all()
