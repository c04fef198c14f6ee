"""SQLAlchemy models for the warehouse schema.

Foreign keys are declared only where the service layer checks that the
parent exists before the row is written (inbound order -> employee,
product record -> product). Other ``*_id`` columns are plain integers
and reports join them explicitly.
"""

from datetime import date

from sqlalchemy import (
    Date,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base


def today() -> date:
    """Return the current date in the host's local time zone."""
    return date.today()


class Locality(Base):
    __tablename__ = "localities"
    __table_args__ = (
        UniqueConstraint("locality_name", name="uq_localities_locality_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locality_name: Mapped[str] = mapped_column(String(255), nullable=False)
    province_name: Mapped[str] = mapped_column(String(255), nullable=False)
    country_name: Mapped[str] = mapped_column(String(255), nullable=False)


class Seller(Base):
    __tablename__ = "sellers"
    __table_args__ = (UniqueConstraint("cid", name="uq_sellers_cid"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cid: Mapped[int] = mapped_column(Integer, nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    locality_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("product_code", name="uq_products_product_code"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_code: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    netweight: Mapped[float] = mapped_column(Float, nullable=False)
    expiration_rate: Mapped[float] = mapped_column(Float, nullable=False)
    recommended_freezing_temperature: Mapped[float] = mapped_column(
        Float, nullable=False
    )
    freezing_rate: Mapped[float] = mapped_column(Float, nullable=False)
    product_type_id: Mapped[int] = mapped_column(Integer, nullable=False)
    seller_id: Mapped[int] = mapped_column(Integer, nullable=False)


class Warehouse(Base):
    __tablename__ = "warehouses"
    __table_args__ = (
        UniqueConstraint("warehouse_code", name="uq_warehouses_warehouse_code"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    warehouse_code: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    minimum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)


class Section(Base):
    __tablename__ = "sections"
    __table_args__ = (
        UniqueConstraint("section_number", name="uq_sections_section_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    section_number: Mapped[int] = mapped_column(Integer, nullable=False)
    current_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    current_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    maximum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    warehouse_id: Mapped[int] = mapped_column(Integer, nullable=False)
    product_type_id: Mapped[int] = mapped_column(Integer, nullable=False)


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("card_number_id", name="uq_employees_card_number_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    card_number_id: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    warehouse_id: Mapped[int] = mapped_column(Integer, nullable=False)


class Carry(Base):
    __tablename__ = "carries"
    __table_args__ = (UniqueConstraint("cid", name="uq_carries_cid"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cid: Mapped[str] = mapped_column(String(255), nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    locality_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    batch_number: Mapped[int] = mapped_column(Integer, nullable=False)


class ProductBatch(Base):
    __tablename__ = "product_batches"
    __table_args__ = (
        UniqueConstraint("batch_number", name="uq_product_batches_batch_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    batch_number: Mapped[int] = mapped_column(Integer, nullable=False)
    current_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    initial_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    manufacturing_date: Mapped[date] = mapped_column(Date, nullable=False)
    manufacturing_hour: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[float] = mapped_column(Float, nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False)
    section_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


class InboundOrder(Base):
    __tablename__ = "inbound_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    order_number: Mapped[str] = mapped_column(String(255), nullable=False)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id"), nullable=False, index=True
    )
    product_batch_id: Mapped[int] = mapped_column(Integer, nullable=False)
    warehouse_id: Mapped[int] = mapped_column(Integer, nullable=False)


class ProductRecord(Base):
    __tablename__ = "product_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    last_update_date: Mapped[date] = mapped_column(Date, nullable=False)
    purchase_price: Mapped[float] = mapped_column(
        Numeric(19, 2, asdecimal=False), nullable=False
    )
    sale_price: Mapped[float] = mapped_column(
        Numeric(19, 2, asdecimal=False), nullable=False
    )
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id"), nullable=False, index=True
    )
