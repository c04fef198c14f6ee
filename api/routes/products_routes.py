"""Product CRUD endpoints and the product-record count report.

Route ordering note: /reportRecords is defined before /{product_id} so the
literal segment is not parsed as an id.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response

from core.database import DbSession
from schemas import ProductCreate, ProductData, ProductRecordsReport, ProductUpdate
from services.products_service import (
    ProductCodeExistsError,
    ProductNotFoundError,
    create_product,
    delete_product,
    get_product,
    list_products,
    product_records_report,
    records_report,
    update_product,
)

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductData])
async def list_products_endpoint(db: DbSession) -> list[ProductData]:
    return await list_products(db)


@router.get(
    "/reportRecords",
    response_model=list[ProductRecordsReport] | ProductRecordsReport,
    responses={404: {"description": "Product not found"}},
)
async def report_records_endpoint(
    db: DbSession,
    product_id: Annotated[int | None, Query(alias="id")] = None,
) -> list[ProductRecordsReport] | ProductRecordsReport:
    """Count product records per product, or for one product with ?id=."""
    if product_id is None:
        return await records_report(db)
    try:
        return await product_records_report(db, product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/{product_id}",
    response_model=ProductData,
    responses={404: {"description": "Product not found"}},
)
async def get_product_endpoint(product_id: int, db: DbSession) -> ProductData:
    try:
        return await get_product(db, product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=ProductData,
    status_code=201,
    responses={409: {"description": "Product code already exists"}},
)
async def create_product_endpoint(body: ProductCreate, db: DbSession) -> ProductData:
    try:
        return await create_product(db, body)
    except ProductCodeExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{product_id}",
    response_model=ProductData,
    responses={
        404: {"description": "Product not found"},
        409: {"description": "Product code already exists"},
    },
)
async def update_product_endpoint(
    product_id: int, body: ProductUpdate, db: DbSession
) -> ProductData:
    try:
        return await update_product(db, product_id, body)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProductCodeExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{product_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Product not found"}},
)
async def delete_product_endpoint(product_id: int, db: DbSession) -> None:
    try:
        await delete_product(db, product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
