"""Product batch CRUD endpoints."""

from fastapi import APIRouter, HTTPException, Response

from core.database import DbSession
from schemas import ProductBatchCreate, ProductBatchData, ProductBatchUpdate
from services.product_batches_service import (
    BatchNumberExistsError,
    ProductBatchNotFoundError,
    create_product_batch,
    delete_product_batch,
    get_product_batch,
    list_product_batches,
    update_product_batch,
)

router = APIRouter(prefix="/api/v1/productBatches", tags=["product batches"])


@router.get("", response_model=list[ProductBatchData])
async def list_product_batches_endpoint(db: DbSession) -> list[ProductBatchData]:
    return await list_product_batches(db)


@router.get(
    "/{batch_id}",
    response_model=ProductBatchData,
    responses={404: {"description": "Product batch not found"}},
)
async def get_product_batch_endpoint(batch_id: int, db: DbSession) -> ProductBatchData:
    try:
        return await get_product_batch(db, batch_id)
    except ProductBatchNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=ProductBatchData,
    status_code=201,
    responses={409: {"description": "Batch number already exists"}},
)
async def create_product_batch_endpoint(
    body: ProductBatchCreate, db: DbSession
) -> ProductBatchData:
    try:
        return await create_product_batch(db, body)
    except BatchNumberExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{batch_id}",
    response_model=ProductBatchData,
    responses={
        404: {"description": "Product batch not found"},
        409: {"description": "Batch number already exists"},
    },
)
async def update_product_batch_endpoint(
    batch_id: int, body: ProductBatchUpdate, db: DbSession
) -> ProductBatchData:
    try:
        return await update_product_batch(db, batch_id, body)
    except ProductBatchNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BatchNumberExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{batch_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Product batch not found"}},
)
async def delete_product_batch_endpoint(batch_id: int, db: DbSession) -> None:
    try:
        await delete_product_batch(db, batch_id)
    except ProductBatchNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
