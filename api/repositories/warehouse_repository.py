"""Repository for warehouse operations."""

from models import Warehouse
from repositories.base import CrudRepository


class WarehouseRepository(CrudRepository[Warehouse]):
    model = Warehouse
    resource = "warehouse"
    unique_field = "warehouse_code"
