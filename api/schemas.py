"""Pydantic schemas for API request/response validation.

Each resource has:
- ``<Resource>Create``: create payload; every field is required and must not
  hold its type's zero value (``""``, ``0``, ``0.0``, ``None``)
- ``<Resource>Update``: patch payload; every field defaults to its zero value,
  which the service layer reads as "leave unchanged"
- ``<Resource>Data``: the stored record, including its ``id``
"""

from datetime import date
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


def is_zero_value(value: Any) -> bool:
    """Return True if ``value`` is the zero value of its type."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, int | float):
        return value == 0
    if isinstance(value, str | bytes | list | tuple | dict | set):
        return len(value) == 0
    return False


class CreateRequest(BaseModel):
    """Base for create payloads. A client-supplied ``id`` is ignored."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def reject_zero_values(self) -> Self:
        zero_fields = [name for name, value in self if is_zero_value(value)]
        if zero_fields:
            raise ValueError(
                "required fields must not be empty or zero: " + ", ".join(zero_fields)
            )
        return self


class UpdateRequest(BaseModel):
    """Base for patch payloads. A client-supplied ``id`` is ignored.

    A JSON ``null`` reads the same as an omitted field.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class RecordData(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int


# --- Localities ---


class LocalityBase(BaseModel):
    locality_name: str
    province_name: str
    country_name: str


class LocalityCreate(LocalityBase, CreateRequest):
    pass


class LocalityData(LocalityBase, RecordData):
    pass


class LocalitySellersReport(BaseModel):
    locality_id: int
    locality_name: str
    sellers_count: int


class LocalityCarriesReport(BaseModel):
    locality_id: int
    locality_name: str
    carries_count: int


# --- Sellers ---


class SellerBase(BaseModel):
    cid: int
    company_name: str
    address: str
    telephone: str
    locality_id: int


class SellerCreate(SellerBase, CreateRequest):
    pass


class SellerUpdate(UpdateRequest):
    cid: int = 0
    company_name: str = ""
    address: str = ""
    telephone: str = ""
    locality_id: int = 0


class SellerData(SellerBase, RecordData):
    pass


# --- Products ---


class ProductBase(BaseModel):
    product_code: str
    description: str
    width: float
    height: float
    length: float
    netweight: float
    expiration_rate: float
    recommended_freezing_temperature: float
    freezing_rate: float
    product_type_id: int
    seller_id: int


class ProductCreate(ProductBase, CreateRequest):
    pass


class ProductUpdate(UpdateRequest):
    product_code: str = ""
    description: str = ""
    width: float = 0.0
    height: float = 0.0
    length: float = 0.0
    netweight: float = 0.0
    expiration_rate: float = 0.0
    recommended_freezing_temperature: float = 0.0
    freezing_rate: float = 0.0
    product_type_id: int = 0
    seller_id: int = 0


class ProductData(ProductBase, RecordData):
    pass


class ProductRecordsReport(BaseModel):
    product_id: int
    description: str
    records_count: int


# --- Warehouses ---


class WarehouseBase(BaseModel):
    warehouse_code: str
    address: str
    telephone: str
    minimum_capacity: int
    minimum_temperature: int


class WarehouseCreate(WarehouseBase, CreateRequest):
    pass


class WarehouseUpdate(UpdateRequest):
    warehouse_code: str = ""
    address: str = ""
    telephone: str = ""
    minimum_capacity: int = 0
    minimum_temperature: int = 0


class WarehouseData(WarehouseBase, RecordData):
    pass


# --- Sections ---


class SectionBase(BaseModel):
    section_number: int
    current_temperature: int
    minimum_temperature: int
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int


class SectionCreate(SectionBase, CreateRequest):
    pass


class SectionUpdate(UpdateRequest):
    section_number: int = 0
    current_temperature: int = 0
    minimum_temperature: int = 0
    current_capacity: int = 0
    minimum_capacity: int = 0
    maximum_capacity: int = 0
    warehouse_id: int = 0
    product_type_id: int = 0


class SectionData(SectionBase, RecordData):
    pass


class SectionProductsReport(BaseModel):
    section_id: int
    section_number: int
    products_count: int


# --- Employees ---


class EmployeeBase(BaseModel):
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int


class EmployeeCreate(EmployeeBase, CreateRequest):
    pass


class EmployeeUpdate(UpdateRequest):
    card_number_id: str = ""
    first_name: str = ""
    last_name: str = ""
    warehouse_id: int = 0


class EmployeeData(EmployeeBase, RecordData):
    pass


class EmployeeInboundOrdersReport(EmployeeData):
    inbound_orders_count: int


# --- Carries ---


class CarryBase(BaseModel):
    cid: str
    company_name: str
    address: str
    telephone: str
    locality_id: int
    batch_number: int


class CarryCreate(CarryBase, CreateRequest):
    pass


class CarryUpdate(UpdateRequest):
    cid: str = ""
    company_name: str = ""
    address: str = ""
    telephone: str = ""
    locality_id: int = 0
    batch_number: int = 0


class CarryData(CarryBase, RecordData):
    pass


# --- Product batches ---


class ProductBatchBase(BaseModel):
    batch_number: int
    current_quantity: int
    current_temperature: int
    due_date: date
    initial_quantity: int
    manufacturing_date: date
    manufacturing_hour: int
    minimum_temperature: float
    product_id: int
    section_id: int


class ProductBatchCreate(ProductBatchBase, CreateRequest):
    pass


class ProductBatchUpdate(UpdateRequest):
    batch_number: int = 0
    current_quantity: int = 0
    current_temperature: int = 0
    due_date: date | None = None
    initial_quantity: int = 0
    manufacturing_date: date | None = None
    manufacturing_hour: int = 0
    minimum_temperature: float = 0.0
    product_id: int = 0
    section_id: int = 0


class ProductBatchData(ProductBatchBase, RecordData):
    pass


# --- Inbound orders ---


class InboundOrderBase(BaseModel):
    order_date: date
    order_number: str
    employee_id: int
    product_batch_id: int
    warehouse_id: int


class InboundOrderCreate(InboundOrderBase, CreateRequest):
    pass


class InboundOrderData(InboundOrderBase, RecordData):
    pass


# --- Product records ---


class ProductRecordBase(BaseModel):
    last_update_date: date
    purchase_price: float
    sale_price: float
    product_id: int


class ProductRecordCreate(ProductRecordBase, CreateRequest):
    pass


class ProductRecordRequest(BaseModel):
    """Product records are posted wrapped in a ``data`` envelope."""

    data: ProductRecordCreate


class ProductRecordData(ProductRecordBase, RecordData):
    pass


# --- Health ---


class HealthResponse(BaseModel):
    status: str
    service: str


class PoolStatusResponse(BaseModel):
    pool_size: int
    checked_out: int
    overflow: int
    checked_in: int


class DetailedHealthResponse(HealthResponse):
    database: bool
    missing_tables: list[str] = Field(default_factory=list)
    pool: PoolStatusResponse | None = Field(default=None)
