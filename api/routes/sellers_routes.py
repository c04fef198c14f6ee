"""Seller CRUD endpoints."""

from fastapi import APIRouter, HTTPException, Response

from core.database import DbSession
from schemas import SellerCreate, SellerData, SellerUpdate
from services.sellers_service import (
    SellerCidExistsError,
    SellerNotFoundError,
    create_seller,
    delete_seller,
    get_seller,
    list_sellers,
    update_seller,
)

router = APIRouter(prefix="/api/v1/sellers", tags=["sellers"])


@router.get("", response_model=list[SellerData])
async def list_sellers_endpoint(db: DbSession) -> list[SellerData]:
    return await list_sellers(db)


@router.get(
    "/{seller_id}",
    response_model=SellerData,
    responses={404: {"description": "Seller not found"}},
)
async def get_seller_endpoint(seller_id: int, db: DbSession) -> SellerData:
    try:
        return await get_seller(db, seller_id)
    except SellerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=SellerData,
    status_code=201,
    responses={409: {"description": "Seller cid already exists"}},
)
async def create_seller_endpoint(body: SellerCreate, db: DbSession) -> SellerData:
    try:
        return await create_seller(db, body)
    except SellerCidExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{seller_id}",
    response_model=SellerData,
    responses={
        404: {"description": "Seller not found"},
        409: {"description": "Seller cid already exists"},
    },
)
async def update_seller_endpoint(
    seller_id: int, body: SellerUpdate, db: DbSession
) -> SellerData:
    try:
        return await update_seller(db, seller_id, body)
    except SellerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SellerCidExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{seller_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Seller not found"}},
)
async def delete_seller_endpoint(seller_id: int, db: DbSession) -> None:
    try:
        await delete_seller(db, seller_id)
    except SellerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
