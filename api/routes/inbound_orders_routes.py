"""Inbound order endpoints."""

from fastapi import APIRouter, HTTPException

from core.database import DbSession
from schemas import InboundOrderCreate, InboundOrderData
from services.inbound_orders_service import (
    InboundOrderNotFoundError,
    OrderEmployeeNotFoundError,
    create_inbound_order,
    get_inbound_order,
    list_inbound_orders,
)

router = APIRouter(prefix="/api/v1/inboundOrders", tags=["inbound orders"])


@router.get("", response_model=list[InboundOrderData])
async def list_inbound_orders_endpoint(db: DbSession) -> list[InboundOrderData]:
    return await list_inbound_orders(db)


@router.get(
    "/{order_id}",
    response_model=InboundOrderData,
    responses={404: {"description": "Inbound order not found"}},
)
async def get_inbound_order_endpoint(order_id: int, db: DbSession) -> InboundOrderData:
    try:
        return await get_inbound_order(db, order_id)
    except InboundOrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=InboundOrderData,
    status_code=201,
    responses={409: {"description": "Employee does not exist"}},
)
async def create_inbound_order_endpoint(
    body: InboundOrderCreate, db: DbSession
) -> InboundOrderData:
    """Create an inbound order for an existing employee."""
    try:
        return await create_inbound_order(db, body)
    except OrderEmployeeNotFoundError as e:
        raise HTTPException(status_code=409, detail=str(e))
