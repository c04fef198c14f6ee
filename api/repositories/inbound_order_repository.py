"""Repository for inbound order operations.

Inbound orders have no natural key; uniqueness is not checked on create.
"""

from models import InboundOrder
from repositories.base import CrudRepository


class InboundOrderRepository(CrudRepository[InboundOrder]):
    model = InboundOrder
    resource = "inbound_order"
