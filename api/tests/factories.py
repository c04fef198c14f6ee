"""Factory Boy factories for generating test data.

Factories provide a clean way to create test objects with sensible defaults.
Override specific fields as needed in tests.

Usage:
    # Create a warehouse
    warehouse = WarehouseFactory.build()  # In-memory only
    warehouse = await create_async(WarehouseFactory, db_session)  # Persisted

    # Override fields
    warehouse = WarehouseFactory.build(warehouse_code="HCD")

    # Create related objects
    order = InboundOrderFactory.build(employee_id=employee.id)
"""

from datetime import date, timedelta

import factory
from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from models import (
    Carry,
    Employee,
    InboundOrder,
    Locality,
    Product,
    ProductBatch,
    ProductRecord,
    Section,
    Seller,
    Warehouse,
)

fake = Faker()


# =============================================================================
# Async Factory Helpers
# =============================================================================


async def create_async(
    factory_class: type[factory.Factory], db: AsyncSession, **kwargs
):
    """Create an instance using a factory and persist to database.

    Usage:
        warehouse = await create_async(WarehouseFactory, db_session, address="x")
    """
    instance = factory_class.build(**kwargs)
    db.add(instance)
    await db.flush()
    await db.refresh(instance)
    return instance


async def create_batch_async(
    factory_class: type[factory.Factory], db: AsyncSession, size: int, **kwargs
):
    """Create multiple instances and persist to database."""
    instances = factory_class.build_batch(size, **kwargs)
    for instance in instances:
        db.add(instance)
    await db.flush()
    for instance in instances:
        await db.refresh(instance)
    return instances


# =============================================================================
# Model Factories
# =============================================================================


class LocalityFactory(factory.Factory):
    class Meta:
        model = Locality

    locality_name = factory.Sequence(lambda n: f"{fake.city()} {n}")
    province_name = factory.LazyAttribute(lambda _: fake.state())
    country_name = factory.LazyAttribute(lambda _: fake.country())


class SellerFactory(factory.Factory):
    class Meta:
        model = Seller

    cid = factory.Sequence(lambda n: 1000 + n)
    company_name = factory.LazyAttribute(lambda _: fake.company())
    address = factory.LazyAttribute(lambda _: fake.street_address())
    telephone = factory.LazyAttribute(lambda _: fake.numerify("###-####"))
    locality_id = 1


class ProductFactory(factory.Factory):
    class Meta:
        model = Product

    product_code = factory.Sequence(lambda n: f"PROD-{n:04d}")
    description = factory.LazyAttribute(lambda _: fake.word())
    width = 1.5
    height = 2.0
    length = 3.25
    netweight = 10.0
    expiration_rate = 0.5
    recommended_freezing_temperature = -4.0
    freezing_rate = 1.2
    product_type_id = 1
    seller_id = 1


class WarehouseFactory(factory.Factory):
    """Factory for creating Warehouse instances."""

    class Meta:
        model = Warehouse

    warehouse_code = factory.Sequence(lambda n: f"WH-{n:04d}")
    address = factory.LazyAttribute(lambda _: fake.street_address())
    telephone = factory.LazyAttribute(lambda _: fake.numerify("###-####"))
    minimum_capacity = 10
    minimum_temperature = 5


class SectionFactory(factory.Factory):
    class Meta:
        model = Section

    section_number = factory.Sequence(lambda n: 100 + n)
    current_temperature = 4
    minimum_temperature = -2
    current_capacity = 50
    minimum_capacity = 10
    maximum_capacity = 200
    warehouse_id = 1
    product_type_id = 1


class EmployeeFactory(factory.Factory):
    """Factory for creating Employee instances."""

    class Meta:
        model = Employee

    card_number_id = factory.Sequence(lambda n: f"CARD-{n:05d}")
    first_name = factory.LazyAttribute(lambda _: fake.first_name())
    last_name = factory.LazyAttribute(lambda _: fake.last_name())
    warehouse_id = 1


class CarryFactory(factory.Factory):
    class Meta:
        model = Carry

    cid = factory.Sequence(lambda n: f"CID-{n:04d}")
    company_name = factory.LazyAttribute(lambda _: fake.company())
    address = factory.LazyAttribute(lambda _: fake.street_address())
    telephone = factory.LazyAttribute(lambda _: fake.numerify("###-####"))
    locality_id = 1
    batch_number = 1


class ProductBatchFactory(factory.Factory):
    class Meta:
        model = ProductBatch

    batch_number = factory.Sequence(lambda n: 5000 + n)
    current_quantity = 20
    current_temperature = 3
    due_date = factory.LazyFunction(lambda: date.today() + timedelta(days=30))
    initial_quantity = 25
    manufacturing_date = factory.LazyFunction(lambda: date.today() - timedelta(days=2))
    manufacturing_hour = 10
    minimum_temperature = -5.0
    product_id = 1
    section_id = 1


class InboundOrderFactory(factory.Factory):
    class Meta:
        model = InboundOrder

    order_date = factory.LazyFunction(date.today)
    order_number = factory.Sequence(lambda n: f"ORDER-{n:05d}")
    employee_id = 1
    product_batch_id = 1
    warehouse_id = 1


class ProductRecordFactory(factory.Factory):
    class Meta:
        model = ProductRecord

    last_update_date = factory.LazyFunction(lambda: date.today() - timedelta(days=1))
    purchase_price = 10.5
    sale_price = 15.25
    product_id = 1
