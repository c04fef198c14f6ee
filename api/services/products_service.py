"""Product business logic and the product-record count report."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.product_repository import ProductRepository
from schemas import ProductCreate, ProductData, ProductRecordsReport, ProductUpdate
from services import crud
from services.errors import ConflictError, NotFoundError


class ProductNotFoundError(NotFoundError):
    resource = "product"


class ProductCodeExistsError(ConflictError):
    resource = "product"
    field = "product_code"


async def list_products(db: AsyncSession) -> list[ProductData]:
    return await crud.list_records(ProductRepository(db), ProductData)


async def get_product(db: AsyncSession, product_id: int) -> ProductData:
    """Get a product by id.

    Raises:
        ProductNotFoundError: If no product has ``product_id``.
    """
    return await crud.get_existing(
        ProductRepository(db), product_id, ProductData, ProductNotFoundError
    )


async def create_product(db: AsyncSession, product: ProductCreate) -> ProductData:
    return await crud.create_unique(
        ProductRepository(db), product, ProductData, ProductCodeExistsError
    )


async def update_product(
    db: AsyncSession, product_id: int, patch: ProductUpdate
) -> ProductData:
    return await crud.update_partial(
        ProductRepository(db),
        product_id,
        patch,
        ProductData,
        ProductNotFoundError,
        ProductCodeExistsError,
    )


async def delete_product(db: AsyncSession, product_id: int) -> None:
    await crud.delete_existing(ProductRepository(db), product_id, ProductNotFoundError)


async def records_report(db: AsyncSession) -> list[ProductRecordsReport]:
    rows = await ProductRepository(db).records_report()
    return [ProductRecordsReport.model_validate(dict(row)) for row in rows]


async def product_records_report(
    db: AsyncSession, product_id: int
) -> ProductRecordsReport:
    """Record count for one product; 0 when it has no records.

    Raises:
        ProductNotFoundError: If the product does not exist.
    """
    rows = await ProductRepository(db).records_report(product_id)
    if not rows:
        raise ProductNotFoundError(product_id)
    return ProductRecordsReport.model_validate(dict(rows[0]))
