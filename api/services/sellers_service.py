"""Seller business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.seller_repository import SellerRepository
from schemas import SellerCreate, SellerData, SellerUpdate
from services import crud
from services.errors import ConflictError, NotFoundError


class SellerNotFoundError(NotFoundError):
    resource = "seller"


class SellerCidExistsError(ConflictError):
    resource = "seller"
    field = "cid"


async def list_sellers(db: AsyncSession) -> list[SellerData]:
    return await crud.list_records(SellerRepository(db), SellerData)


async def get_seller(db: AsyncSession, seller_id: int) -> SellerData:
    return await crud.get_existing(
        SellerRepository(db), seller_id, SellerData, SellerNotFoundError
    )


async def create_seller(db: AsyncSession, seller: SellerCreate) -> SellerData:
    return await crud.create_unique(
        SellerRepository(db), seller, SellerData, SellerCidExistsError
    )


async def update_seller(
    db: AsyncSession, seller_id: int, patch: SellerUpdate
) -> SellerData:
    return await crud.update_partial(
        SellerRepository(db),
        seller_id,
        patch,
        SellerData,
        SellerNotFoundError,
        SellerCidExistsError,
    )


async def delete_seller(db: AsyncSession, seller_id: int) -> None:
    await crud.delete_existing(SellerRepository(db), seller_id, SellerNotFoundError)
