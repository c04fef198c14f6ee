"""Integration tests for CrudRepository against the database.

Tests cover:
- insert assigns increasing ids
- get_by_id / exists for present and absent ids
- exists_by_unique_key with and without exclude_id
- update_by_id and delete_by_id row counts
- list_all ordering
"""

import pytest

from repositories.inbound_order_repository import InboundOrderRepository
from repositories.warehouse_repository import WarehouseRepository
from tests.factories import WarehouseFactory, create_async


def _warehouse_values(code: str) -> dict:
    return {
        "warehouse_code": code,
        "address": "Street 1",
        "telephone": "555-0101",
        "minimum_capacity": 10,
        "minimum_temperature": 5,
    }


@pytest.mark.integration
class TestCrudRepository:
    async def test_insert_assigns_ids(self, db_session):
        repo = WarehouseRepository(db_session)

        first = await repo.insert(_warehouse_values("A"))
        second = await repo.insert(_warehouse_values("B"))

        assert first > 0
        assert second > first

    async def test_get_by_id(self, db_session):
        warehouse = await create_async(WarehouseFactory, db_session)
        repo = WarehouseRepository(db_session)

        found = await repo.get_by_id(warehouse.id)

        assert found is not None
        assert found.warehouse_code == warehouse.warehouse_code
        assert await repo.get_by_id(warehouse.id + 100) is None

    async def test_exists(self, db_session):
        warehouse = await create_async(WarehouseFactory, db_session)
        repo = WarehouseRepository(db_session)

        assert await repo.exists(warehouse.id) is True
        assert await repo.exists(warehouse.id + 1) is False

    async def test_exists_by_unique_key(self, db_session):
        warehouse = await create_async(
            WarehouseFactory, db_session, warehouse_code="HCD"
        )
        repo = WarehouseRepository(db_session)

        assert await repo.exists_by_unique_key("HCD") is True
        assert await repo.exists_by_unique_key("XYZ") is False
        assert await repo.exists_by_unique_key("HCD", exclude_id=warehouse.id) is False

    async def test_no_unique_field_never_exists(self, db_session):
        repo = InboundOrderRepository(db_session)
        assert await repo.exists_by_unique_key("anything") is False

    async def test_update_by_id(self, db_session):
        warehouse = await create_async(WarehouseFactory, db_session)
        repo = WarehouseRepository(db_session)

        values = _warehouse_values("NEW")
        assert await repo.update_by_id(warehouse.id, values) == 1
        assert await repo.update_by_id(warehouse.id + 50, values) == 0

        updated = await repo.get_by_id(warehouse.id)
        assert updated.warehouse_code == "NEW"

    async def test_delete_by_id(self, db_session):
        warehouse = await create_async(WarehouseFactory, db_session)
        repo = WarehouseRepository(db_session)

        assert await repo.delete_by_id(warehouse.id) == 1
        assert await repo.delete_by_id(warehouse.id) == 0
        assert await repo.get_by_id(warehouse.id) is None

    async def test_list_all_ordered_by_id(self, db_session):
        repo = WarehouseRepository(db_session)
        for code in ("C", "A", "B"):
            await repo.insert(_warehouse_values(code))

        rows = await repo.list_all()

        assert [row.warehouse_code for row in rows] == ["C", "A", "B"]
        assert [row.id for row in rows] == sorted(row.id for row in rows)
