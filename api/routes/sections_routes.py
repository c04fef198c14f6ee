"""Section CRUD endpoints and the per-section product quantity report.

Route ordering note: /reportProducts is defined before /{section_id} so the
literal segment is not parsed as an id.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response

from core.database import DbSession
from schemas import SectionCreate, SectionData, SectionProductsReport, SectionUpdate
from services.sections_service import (
    SectionNotFoundError,
    SectionNumberExistsError,
    create_section,
    delete_section,
    get_section,
    list_sections,
    products_report,
    section_products_report,
    update_section,
)

router = APIRouter(prefix="/api/v1/sections", tags=["sections"])


@router.get("", response_model=list[SectionData])
async def list_sections_endpoint(db: DbSession) -> list[SectionData]:
    return await list_sections(db)


@router.get(
    "/reportProducts",
    response_model=list[SectionProductsReport] | SectionProductsReport,
    responses={404: {"description": "Section not found or empty"}},
)
async def report_products_endpoint(
    db: DbSession,
    section_id: Annotated[int | None, Query(alias="id")] = None,
) -> list[SectionProductsReport] | SectionProductsReport:
    """Sum product batch quantities per section, or for one section with ?id=."""
    if section_id is None:
        return await products_report(db)
    try:
        return await section_products_report(db, section_id)
    except SectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/{section_id}",
    response_model=SectionData,
    responses={404: {"description": "Section not found"}},
)
async def get_section_endpoint(section_id: int, db: DbSession) -> SectionData:
    try:
        return await get_section(db, section_id)
    except SectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=SectionData,
    status_code=201,
    responses={409: {"description": "Section number already exists"}},
)
async def create_section_endpoint(body: SectionCreate, db: DbSession) -> SectionData:
    try:
        return await create_section(db, body)
    except SectionNumberExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{section_id}",
    response_model=SectionData,
    responses={
        404: {"description": "Section not found"},
        409: {"description": "Section number already exists"},
    },
)
async def update_section_endpoint(
    section_id: int, body: SectionUpdate, db: DbSession
) -> SectionData:
    try:
        return await update_section(db, section_id, body)
    except SectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SectionNumberExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{section_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Section not found"}},
)
async def delete_section_endpoint(section_id: int, db: DbSession) -> None:
    try:
        await delete_section(db, section_id)
    except SectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
