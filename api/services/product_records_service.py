"""Product record business logic.

A product record is a dated price entry for an existing product. Its
``last_update_date`` may not lie in the future.
"""

import logging
from collections.abc import Callable
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from models import today
from repositories.product_record_repository import ProductRecordRepository
from schemas import ProductRecordCreate, ProductRecordData
from services import crud
from services.errors import (
    ConflictError,
    InvalidTemporalValueError,
    NotFoundError,
    ReferenceNotFoundError,
)
from services.products_service import ProductNotFoundError, get_product

logger = logging.getLogger(__name__)


class ProductRecordNotFoundError(NotFoundError):
    resource = "product record"


class RecordProductNotFoundError(ReferenceNotFoundError):
    """Raised when a product record names a product that does not exist."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__("no product matches the specified id")


class FutureDateError(InvalidTemporalValueError):
    """Raised when last_update_date is later than the current date."""

    def __init__(self, last_update_date: date):
        self.last_update_date = last_update_date
        super().__init__("last update date provided exceeds the current system date")


async def get_product_record(db: AsyncSession, record_id: int) -> ProductRecordData:
    return await crud.get_existing(
        ProductRecordRepository(db),
        record_id,
        ProductRecordData,
        ProductRecordNotFoundError,
    )


async def create_product_record(
    db: AsyncSession,
    record: ProductRecordCreate,
    *,
    now: Callable[[], date] = today,
) -> ProductRecordData:
    """Create a product record.

    Args:
        db: Database session
        record: The validated record payload
        now: Returns the current date; tests pin it

    Raises:
        FutureDateError: If last_update_date is after ``now()``.
        RecordProductNotFoundError: If product_id matches no product.
    """
    if record.last_update_date > now():
        raise FutureDateError(record.last_update_date)

    try:
        await get_product(db, record.product_id)
    except ProductNotFoundError as e:
        logger.warning(
            "product_record.product_missing",
            extra={"product_id": record.product_id},
        )
        raise RecordProductNotFoundError(record.product_id) from e

    return await crud.create_unique(
        ProductRecordRepository(db), record, ProductRecordData, ConflictError
    )
