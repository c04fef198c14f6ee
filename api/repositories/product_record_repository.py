"""Repository for product record operations."""

from models import ProductRecord
from repositories.base import CrudRepository


class ProductRecordRepository(CrudRepository[ProductRecord]):
    model = ProductRecord
    resource = "product_record"
