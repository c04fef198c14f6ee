"""Product batch business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.product_batch_repository import ProductBatchRepository
from schemas import ProductBatchCreate, ProductBatchData, ProductBatchUpdate
from services import crud
from services.errors import ConflictError, NotFoundError


class ProductBatchNotFoundError(NotFoundError):
    resource = "product batch"


class BatchNumberExistsError(ConflictError):
    resource = "product batch"
    field = "batch_number"


async def list_product_batches(db: AsyncSession) -> list[ProductBatchData]:
    return await crud.list_records(ProductBatchRepository(db), ProductBatchData)


async def get_product_batch(db: AsyncSession, batch_id: int) -> ProductBatchData:
    return await crud.get_existing(
        ProductBatchRepository(db),
        batch_id,
        ProductBatchData,
        ProductBatchNotFoundError,
    )


async def create_product_batch(
    db: AsyncSession, batch: ProductBatchCreate
) -> ProductBatchData:
    return await crud.create_unique(
        ProductBatchRepository(db), batch, ProductBatchData, BatchNumberExistsError
    )


async def update_product_batch(
    db: AsyncSession, batch_id: int, patch: ProductBatchUpdate
) -> ProductBatchData:
    return await crud.update_partial(
        ProductBatchRepository(db),
        batch_id,
        patch,
        ProductBatchData,
        ProductBatchNotFoundError,
        BatchNumberExistsError,
    )


async def delete_product_batch(db: AsyncSession, batch_id: int) -> None:
    await crud.delete_existing(
        ProductBatchRepository(db), batch_id, ProductBatchNotFoundError
    )
