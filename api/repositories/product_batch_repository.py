"""Repository for product batch operations."""

from models import ProductBatch
from repositories.base import CrudRepository


class ProductBatchRepository(CrudRepository[ProductBatch]):
    model = ProductBatch
    resource = "product_batch"
    unique_field = "batch_number"
