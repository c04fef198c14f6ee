"""Section business logic and the per-section product quantity report."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.section_repository import SectionRepository
from schemas import SectionCreate, SectionData, SectionProductsReport, SectionUpdate
from services import crud
from services.errors import ConflictError, NotFoundError


class SectionNotFoundError(NotFoundError):
    resource = "section"


class SectionNumberExistsError(ConflictError):
    resource = "section"
    field = "section_number"


async def list_sections(db: AsyncSession) -> list[SectionData]:
    return await crud.list_records(SectionRepository(db), SectionData)


async def get_section(db: AsyncSession, section_id: int) -> SectionData:
    return await crud.get_existing(
        SectionRepository(db), section_id, SectionData, SectionNotFoundError
    )


async def create_section(db: AsyncSession, section: SectionCreate) -> SectionData:
    return await crud.create_unique(
        SectionRepository(db), section, SectionData, SectionNumberExistsError
    )


async def update_section(
    db: AsyncSession, section_id: int, patch: SectionUpdate
) -> SectionData:
    return await crud.update_partial(
        SectionRepository(db),
        section_id,
        patch,
        SectionData,
        SectionNotFoundError,
        SectionNumberExistsError,
    )


async def delete_section(db: AsyncSession, section_id: int) -> None:
    await crud.delete_existing(SectionRepository(db), section_id, SectionNotFoundError)


async def products_report(db: AsyncSession) -> list[SectionProductsReport]:
    rows = await SectionRepository(db).products_report()
    return [SectionProductsReport.model_validate(dict(row)) for row in rows]


async def section_products_report(
    db: AsyncSession, section_id: int
) -> SectionProductsReport:
    """Product quantity for one section.

    Raises:
        SectionNotFoundError: If the section does not exist or holds no batches.
    """
    rows = await SectionRepository(db).products_report(section_id)
    if not rows:
        raise SectionNotFoundError(section_id)
    return SectionProductsReport.model_validate(dict(rows[0]))
