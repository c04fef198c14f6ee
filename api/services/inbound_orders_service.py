"""Inbound order business logic.

An inbound order may only be written for an employee that exists.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.employee_repository import EmployeeRepository
from repositories.inbound_order_repository import InboundOrderRepository
from schemas import InboundOrderCreate, InboundOrderData
from services import crud
from services.errors import ConflictError, NotFoundError, ReferenceNotFoundError

logger = logging.getLogger(__name__)


class InboundOrderNotFoundError(NotFoundError):
    resource = "inbound order"


class OrderEmployeeNotFoundError(ReferenceNotFoundError):
    """Raised when an inbound order names an employee that does not exist."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__("the employee does not exist")


async def list_inbound_orders(db: AsyncSession) -> list[InboundOrderData]:
    return await crud.list_records(InboundOrderRepository(db), InboundOrderData)


async def get_inbound_order(db: AsyncSession, order_id: int) -> InboundOrderData:
    return await crud.get_existing(
        InboundOrderRepository(db),
        order_id,
        InboundOrderData,
        InboundOrderNotFoundError,
    )


async def create_inbound_order(
    db: AsyncSession, order: InboundOrderCreate
) -> InboundOrderData:
    """Create an inbound order after checking its employee exists.

    Raises:
        OrderEmployeeNotFoundError: If employee_id matches no employee.
            Nothing is written.
    """
    try:
        await crud.ensure_reference(
            EmployeeRepository(db).exists(order.employee_id),
            OrderEmployeeNotFoundError(order.employee_id),
        )
    except OrderEmployeeNotFoundError:
        logger.warning(
            "inbound_order.employee_missing",
            extra={"employee_id": order.employee_id},
        )
        raise

    # Inbound orders have no uniqueness key, so no conflict is possible
    return await crud.create_unique(
        InboundOrderRepository(db), order, InboundOrderData, ConflictError
    )
