"""Carry CRUD endpoints.

The carries-per-locality report is served from the localities router.
"""

from fastapi import APIRouter, HTTPException, Response

from core.database import DbSession
from schemas import CarryCreate, CarryData, CarryUpdate
from services.carries_service import (
    CarryCidExistsError,
    CarryNotFoundError,
    create_carry,
    delete_carry,
    get_carry,
    list_carries,
    update_carry,
)

router = APIRouter(prefix="/api/v1/carries", tags=["carries"])


@router.get("", response_model=list[CarryData])
async def list_carries_endpoint(db: DbSession) -> list[CarryData]:
    return await list_carries(db)


@router.get(
    "/{carry_id}",
    response_model=CarryData,
    responses={404: {"description": "Carry not found"}},
)
async def get_carry_endpoint(carry_id: int, db: DbSession) -> CarryData:
    try:
        return await get_carry(db, carry_id)
    except CarryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=CarryData,
    status_code=201,
    responses={409: {"description": "Carry cid already exists"}},
)
async def create_carry_endpoint(body: CarryCreate, db: DbSession) -> CarryData:
    try:
        return await create_carry(db, body)
    except CarryCidExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{carry_id}",
    response_model=CarryData,
    responses={
        404: {"description": "Carry not found"},
        409: {"description": "Carry cid already exists"},
    },
)
async def update_carry_endpoint(
    carry_id: int, body: CarryUpdate, db: DbSession
) -> CarryData:
    try:
        return await update_carry(db, carry_id, body)
    except CarryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CarryCidExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{carry_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Carry not found"}},
)
async def delete_carry_endpoint(carry_id: int, db: DbSession) -> None:
    try:
        await delete_carry(db, carry_id)
    except CarryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
