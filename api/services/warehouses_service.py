"""Warehouse business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.warehouse_repository import WarehouseRepository
from schemas import WarehouseCreate, WarehouseData, WarehouseUpdate
from services import crud
from services.errors import ConflictError, NotFoundError


class WarehouseNotFoundError(NotFoundError):
    resource = "warehouse"


class WarehouseCodeExistsError(ConflictError):
    resource = "warehouse"
    field = "warehouse_code"


async def list_warehouses(db: AsyncSession) -> list[WarehouseData]:
    return await crud.list_records(WarehouseRepository(db), WarehouseData)


async def get_warehouse(db: AsyncSession, warehouse_id: int) -> WarehouseData:
    return await crud.get_existing(
        WarehouseRepository(db), warehouse_id, WarehouseData, WarehouseNotFoundError
    )


async def create_warehouse(
    db: AsyncSession, warehouse: WarehouseCreate
) -> WarehouseData:
    """Create a warehouse.

    Raises:
        WarehouseCodeExistsError: If the warehouse_code is already in use.
    """
    return await crud.create_unique(
        WarehouseRepository(db), warehouse, WarehouseData, WarehouseCodeExistsError
    )


async def update_warehouse(
    db: AsyncSession, warehouse_id: int, patch: WarehouseUpdate
) -> WarehouseData:
    return await crud.update_partial(
        WarehouseRepository(db),
        warehouse_id,
        patch,
        WarehouseData,
        WarehouseNotFoundError,
        WarehouseCodeExistsError,
    )


async def delete_warehouse(db: AsyncSession, warehouse_id: int) -> None:
    await crud.delete_existing(
        WarehouseRepository(db), warehouse_id, WarehouseNotFoundError
    )
