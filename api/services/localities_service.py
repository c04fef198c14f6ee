"""Locality business logic and the sellers-per-locality report."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.locality_repository import LocalityRepository
from schemas import LocalityCreate, LocalityData, LocalitySellersReport
from services import crud
from services.errors import ConflictError, NotFoundError


class LocalityNotFoundError(NotFoundError):
    resource = "locality"


class LocalityNameExistsError(ConflictError):
    resource = "locality"
    field = "locality_name"


async def get_locality(db: AsyncSession, locality_id: int) -> LocalityData:
    return await crud.get_existing(
        LocalityRepository(db), locality_id, LocalityData, LocalityNotFoundError
    )


async def create_locality(db: AsyncSession, locality: LocalityCreate) -> LocalityData:
    return await crud.create_unique(
        LocalityRepository(db), locality, LocalityData, LocalityNameExistsError
    )


async def sellers_report(db: AsyncSession) -> list[LocalitySellersReport]:
    rows = await LocalityRepository(db).sellers_report()
    return [LocalitySellersReport.model_validate(dict(row)) for row in rows]


async def locality_sellers_report(
    db: AsyncSession, locality_id: int
) -> LocalitySellersReport:
    """Seller count for one locality.

    Raises:
        LocalityNotFoundError: If the locality does not exist or has no sellers.
    """
    rows = await LocalityRepository(db).sellers_report(locality_id)
    if not rows:
        raise LocalityNotFoundError(locality_id)
    return LocalitySellersReport.model_validate(dict(rows[0]))
