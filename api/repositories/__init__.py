"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping services free of SQL.
Every resource repository extends CrudRepository, which provides the
record-level protocol the service layer relies on:
get_by_id, exists, exists_by_unique_key, insert, update_by_id,
delete_by_id and list_all.
"""

from repositories.base import CrudRepository
from repositories.carry_repository import CarryRepository
from repositories.employee_repository import EmployeeRepository
from repositories.inbound_order_repository import InboundOrderRepository
from repositories.locality_repository import LocalityRepository
from repositories.product_batch_repository import ProductBatchRepository
from repositories.product_record_repository import ProductRecordRepository
from repositories.product_repository import ProductRepository
from repositories.section_repository import SectionRepository
from repositories.seller_repository import SellerRepository
from repositories.utils import log_slow_query
from repositories.warehouse_repository import WarehouseRepository

__all__ = [
    "CarryRepository",
    "CrudRepository",
    "EmployeeRepository",
    "InboundOrderRepository",
    "LocalityRepository",
    "ProductBatchRepository",
    "ProductRecordRepository",
    "ProductRepository",
    "SectionRepository",
    "SellerRepository",
    "WarehouseRepository",
    "log_slow_query",
]
