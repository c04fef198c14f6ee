"""Locality endpoints and the per-locality seller and carry reports.

Route ordering note: report routes are defined before /{locality_id}.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from core.database import DbSession
from schemas import (
    LocalityCarriesReport,
    LocalityCreate,
    LocalityData,
    LocalitySellersReport,
)
from services.carries_service import carries_report, locality_carries_report
from services.localities_service import (
    LocalityNameExistsError,
    LocalityNotFoundError,
    create_locality,
    get_locality,
    locality_sellers_report,
    sellers_report,
)

router = APIRouter(prefix="/api/v1/localities", tags=["localities"])


@router.post(
    "",
    response_model=LocalityData,
    status_code=201,
    responses={409: {"description": "Locality name already exists"}},
)
async def create_locality_endpoint(
    body: LocalityCreate, db: DbSession
) -> LocalityData:
    try:
        return await create_locality(db, body)
    except LocalityNameExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get(
    "/reportSellers",
    response_model=list[LocalitySellersReport] | LocalitySellersReport,
    responses={404: {"description": "Locality not found or without sellers"}},
)
async def report_sellers_endpoint(
    db: DbSession,
    locality_id: Annotated[int | None, Query(alias="id")] = None,
) -> list[LocalitySellersReport] | LocalitySellersReport:
    """Count sellers per locality, or for one locality with ?id=."""
    if locality_id is None:
        return await sellers_report(db)
    try:
        return await locality_sellers_report(db, locality_id)
    except LocalityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/reportCarries",
    response_model=list[LocalityCarriesReport] | LocalityCarriesReport,
    responses={404: {"description": "Locality not found or without carries"}},
)
async def report_carries_endpoint(
    db: DbSession,
    locality_id: Annotated[int | None, Query(alias="id")] = None,
) -> list[LocalityCarriesReport] | LocalityCarriesReport:
    """Count carries per locality, or for one locality with ?id=."""
    if locality_id is None:
        return await carries_report(db)
    try:
        return await locality_carries_report(db, locality_id)
    except LocalityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/{locality_id}",
    response_model=LocalityData,
    responses={404: {"description": "Locality not found"}},
)
async def get_locality_endpoint(locality_id: int, db: DbSession) -> LocalityData:
    try:
        return await get_locality(db, locality_id)
    except LocalityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
