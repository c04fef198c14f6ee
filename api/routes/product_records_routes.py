"""Product record endpoints.

POST bodies are wrapped in a ``data`` envelope:
    {"data": {"last_update_date": "2021-04-04", "purchase_price": 10.5, ...}}
"""

from fastapi import APIRouter, HTTPException

from core.database import DbSession
from schemas import ProductRecordData, ProductRecordRequest
from services.product_records_service import (
    FutureDateError,
    ProductRecordNotFoundError,
    RecordProductNotFoundError,
    create_product_record,
    get_product_record,
)

router = APIRouter(prefix="/api/v1/productRecords", tags=["product records"])


@router.get(
    "/{record_id}",
    response_model=ProductRecordData,
    responses={404: {"description": "Product record not found"}},
)
async def get_product_record_endpoint(
    record_id: int, db: DbSession
) -> ProductRecordData:
    try:
        return await get_product_record(db, record_id)
    except ProductRecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=ProductRecordData,
    status_code=201,
    responses={
        400: {"description": "last_update_date is in the future"},
        409: {"description": "Product does not exist"},
    },
)
async def create_product_record_endpoint(
    body: ProductRecordRequest, db: DbSession
) -> ProductRecordData:
    try:
        return await create_product_record(db, body.data)
    except FutureDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecordProductNotFoundError as e:
        raise HTTPException(status_code=409, detail=str(e))
