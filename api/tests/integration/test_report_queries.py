"""Integration tests for the aggregate report queries.

Tests cover:
- inbound orders per employee (employees without orders omitted)
- sellers and carries per locality (joined through locality_id)
- product records per product (products without records count 0)
- current product quantity per section
- single-id variants
"""

import pytest

from repositories.carry_repository import CarryRepository
from repositories.employee_repository import EmployeeRepository
from repositories.locality_repository import LocalityRepository
from repositories.product_repository import ProductRepository
from repositories.section_repository import SectionRepository
from tests.factories import (
    CarryFactory,
    EmployeeFactory,
    InboundOrderFactory,
    LocalityFactory,
    ProductBatchFactory,
    ProductFactory,
    ProductRecordFactory,
    SectionFactory,
    SellerFactory,
    create_async,
    create_batch_async,
)


@pytest.mark.integration
class TestEmployeeInboundOrdersReport:
    async def test_counts_orders_per_employee(self, db_session):
        busy = await create_async(EmployeeFactory, db_session, first_name="Busy")
        idle = await create_async(EmployeeFactory, db_session)
        await create_batch_async(
            InboundOrderFactory, db_session, 3, employee_id=busy.id
        )

        rows = await EmployeeRepository(db_session).inbound_orders_report()

        assert len(rows) == 1
        assert rows[0]["id"] == busy.id
        assert rows[0]["first_name"] == "Busy"
        assert rows[0]["inbound_orders_count"] == 3
        assert idle.id not in {row["id"] for row in rows}

    async def test_single_employee(self, db_session):
        first = await create_async(EmployeeFactory, db_session)
        second = await create_async(EmployeeFactory, db_session)
        await create_async(InboundOrderFactory, db_session, employee_id=first.id)
        await create_batch_async(
            InboundOrderFactory, db_session, 2, employee_id=second.id
        )

        rows = await EmployeeRepository(db_session).inbound_orders_report(second.id)

        assert [row["inbound_orders_count"] for row in rows] == [2]


@pytest.mark.integration
class TestLocalityReports:
    async def test_sellers_per_locality(self, db_session):
        north = await create_async(LocalityFactory, db_session, locality_name="North")
        south = await create_async(LocalityFactory, db_session, locality_name="South")
        await create_batch_async(SellerFactory, db_session, 2, locality_id=north.id)
        await create_async(SellerFactory, db_session, locality_id=south.id)

        rows = await LocalityRepository(db_session).sellers_report()

        assert [dict(row) for row in rows] == [
            {"locality_id": north.id, "locality_name": "North", "sellers_count": 2},
            {"locality_id": south.id, "locality_name": "South", "sellers_count": 1},
        ]

    async def test_locality_without_sellers_omitted(self, db_session):
        empty = await create_async(LocalityFactory, db_session)

        rows = await LocalityRepository(db_session).sellers_report(empty.id)

        assert rows == []

    async def test_carries_per_locality(self, db_session):
        north = await create_async(LocalityFactory, db_session, locality_name="North")
        await create_batch_async(CarryFactory, db_session, 3, locality_id=north.id)
        # A carry pointing at a locality that does not exist is not reported
        await create_async(CarryFactory, db_session, locality_id=north.id + 100)

        rows = await CarryRepository(db_session).locality_report()

        assert [dict(row) for row in rows] == [
            {"locality_id": north.id, "locality_name": "North", "carries_count": 3},
        ]


@pytest.mark.integration
class TestProductRecordsReport:
    async def test_products_without_records_count_zero(self, db_session):
        with_records = await create_async(
            ProductFactory, db_session, description="apple"
        )
        without_records = await create_async(
            ProductFactory, db_session, description="pear"
        )
        await create_batch_async(
            ProductRecordFactory, db_session, 2, product_id=with_records.id
        )

        rows = await ProductRepository(db_session).records_report()

        assert [dict(row) for row in rows] == [
            {
                "product_id": with_records.id,
                "description": "apple",
                "records_count": 2,
            },
            {
                "product_id": without_records.id,
                "description": "pear",
                "records_count": 0,
            },
        ]

    async def test_unknown_product_has_no_row(self, db_session):
        rows = await ProductRepository(db_session).records_report(12345)
        assert rows == []


@pytest.mark.integration
class TestSectionProductsReport:
    async def test_sums_current_quantity(self, db_session):
        section = await create_async(SectionFactory, db_session, section_number=7)
        await create_async(
            ProductBatchFactory, db_session, section_id=section.id, current_quantity=5
        )
        await create_async(
            ProductBatchFactory, db_session, section_id=section.id, current_quantity=8
        )

        rows = await SectionRepository(db_session).products_report(section.id)

        assert [dict(row) for row in rows] == [
            {"section_id": section.id, "section_number": 7, "products_count": 13},
        ]

    async def test_section_without_batches_omitted(self, db_session):
        await create_async(SectionFactory, db_session)

        rows = await SectionRepository(db_session).products_report()

        assert rows == []
