"""Warehouse CRUD endpoints."""

from fastapi import APIRouter, HTTPException, Response

from core.database import DbSession
from schemas import WarehouseCreate, WarehouseData, WarehouseUpdate
from services.warehouses_service import (
    WarehouseCodeExistsError,
    WarehouseNotFoundError,
    create_warehouse,
    delete_warehouse,
    get_warehouse,
    list_warehouses,
    update_warehouse,
)

router = APIRouter(prefix="/api/v1/warehouses", tags=["warehouses"])


@router.get("", response_model=list[WarehouseData])
async def list_warehouses_endpoint(db: DbSession) -> list[WarehouseData]:
    """List all warehouses."""
    return await list_warehouses(db)


@router.get(
    "/{warehouse_id}",
    response_model=WarehouseData,
    responses={404: {"description": "Warehouse not found"}},
)
async def get_warehouse_endpoint(warehouse_id: int, db: DbSession) -> WarehouseData:
    try:
        return await get_warehouse(db, warehouse_id)
    except WarehouseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=WarehouseData,
    status_code=201,
    responses={409: {"description": "Warehouse code already exists"}},
)
async def create_warehouse_endpoint(
    body: WarehouseCreate, db: DbSession
) -> WarehouseData:
    """Create a warehouse. Every field is required and must be non-zero."""
    try:
        return await create_warehouse(db, body)
    except WarehouseCodeExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{warehouse_id}",
    response_model=WarehouseData,
    responses={
        404: {"description": "Warehouse not found"},
        409: {"description": "Warehouse code already exists"},
    },
)
async def update_warehouse_endpoint(
    warehouse_id: int, body: WarehouseUpdate, db: DbSession
) -> WarehouseData:
    """Partially update a warehouse. Empty or zero fields are left unchanged."""
    try:
        return await update_warehouse(db, warehouse_id, body)
    except WarehouseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WarehouseCodeExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{warehouse_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Warehouse not found"}},
)
async def delete_warehouse_endpoint(warehouse_id: int, db: DbSession) -> None:
    try:
        await delete_warehouse(db, warehouse_id)
    except WarehouseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
