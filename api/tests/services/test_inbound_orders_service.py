"""Tests for inbound_orders_service.

Tests cover:
- create_inbound_order writes an order for an existing employee
- create_inbound_order rejects an unknown employee and writes nothing
- get_inbound_order not found
"""

from datetime import date

import pytest

from repositories.inbound_order_repository import InboundOrderRepository
from schemas import InboundOrderCreate
from services.inbound_orders_service import (
    InboundOrderNotFoundError,
    OrderEmployeeNotFoundError,
    create_inbound_order,
    get_inbound_order,
    list_inbound_orders,
)
from tests.factories import EmployeeFactory, create_async


def _order(employee_id: int) -> InboundOrderCreate:
    return InboundOrderCreate(
        order_date=date(2021, 4, 4),
        order_number="order#1",
        employee_id=employee_id,
        product_batch_id=1,
        warehouse_id=1,
    )


@pytest.mark.integration
class TestCreateInboundOrder:
    async def test_creates_for_existing_employee(self, db_session):
        employee = await create_async(EmployeeFactory, db_session)

        order = await create_inbound_order(db_session, _order(employee.id))

        assert order.id > 0
        assert order.employee_id == employee.id
        fetched = await get_inbound_order(db_session, order.id)
        assert fetched == order

    async def test_unknown_employee_writes_nothing(self, db_session):
        with pytest.raises(OrderEmployeeNotFoundError, match="employee does not exist"):
            await create_inbound_order(db_session, _order(404))

        assert await InboundOrderRepository(db_session).list_all() == []

    async def test_lists_created_orders(self, db_session):
        employee = await create_async(EmployeeFactory, db_session)
        await create_inbound_order(db_session, _order(employee.id))
        await create_inbound_order(db_session, _order(employee.id))

        orders = await list_inbound_orders(db_session)

        assert len(orders) == 2
        assert orders[0].id < orders[1].id


@pytest.mark.integration
async def test_get_unknown_order_raises(db_session):
    with pytest.raises(InboundOrderNotFoundError):
        await get_inbound_order(db_session, 1)
