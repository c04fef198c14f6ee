"""Carry business logic and the carries-per-locality report."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.carry_repository import CarryRepository
from schemas import CarryCreate, CarryData, CarryUpdate, LocalityCarriesReport
from services import crud
from services.errors import ConflictError, NotFoundError
from services.localities_service import LocalityNotFoundError


class CarryNotFoundError(NotFoundError):
    resource = "carry"


class CarryCidExistsError(ConflictError):
    resource = "carry"
    field = "cid"


async def list_carries(db: AsyncSession) -> list[CarryData]:
    return await crud.list_records(CarryRepository(db), CarryData)


async def get_carry(db: AsyncSession, carry_id: int) -> CarryData:
    return await crud.get_existing(
        CarryRepository(db), carry_id, CarryData, CarryNotFoundError
    )


async def create_carry(db: AsyncSession, carry: CarryCreate) -> CarryData:
    return await crud.create_unique(
        CarryRepository(db), carry, CarryData, CarryCidExistsError
    )


async def update_carry(
    db: AsyncSession, carry_id: int, patch: CarryUpdate
) -> CarryData:
    return await crud.update_partial(
        CarryRepository(db),
        carry_id,
        patch,
        CarryData,
        CarryNotFoundError,
        CarryCidExistsError,
    )


async def delete_carry(db: AsyncSession, carry_id: int) -> None:
    await crud.delete_existing(CarryRepository(db), carry_id, CarryNotFoundError)


async def carries_report(db: AsyncSession) -> list[LocalityCarriesReport]:
    rows = await CarryRepository(db).locality_report()
    return [LocalityCarriesReport.model_validate(dict(row)) for row in rows]


async def locality_carries_report(
    db: AsyncSession, locality_id: int
) -> LocalityCarriesReport:
    """Carry count for one locality.

    Raises:
        LocalityNotFoundError: If the locality does not exist or has no carries.
    """
    rows = await CarryRepository(db).locality_report(locality_id)
    if not rows:
        raise LocalityNotFoundError(locality_id)
    return LocalityCarriesReport.model_validate(dict(rows[0]))
