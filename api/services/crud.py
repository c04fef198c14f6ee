"""Create/update/delete protocol shared by every resource service.

Partial updates use the zero-value convention: a patch is structurally
complete, and any field left at its type's zero value (``""``, ``0``,
``0.0``, ``None``) means "leave unchanged". A caller therefore cannot reset
a field to zero through an update.

The helpers accept any repository that implements ``Repository``, so tests
can substitute an in-memory implementation for the SQL one.
"""

import logging
from collections.abc import Awaitable, Sequence
from typing import Any, Protocol

from pydantic import BaseModel

from schemas import RecordData, is_zero_value
from services.errors import ConflictError, NotFoundError, ReferenceNotFoundError

logger = logging.getLogger(__name__)


class Repository(Protocol):
    resource: str
    unique_field: str | None

    async def list_all(self) -> Sequence[Any]: ...

    async def get_by_id(self, record_id: int) -> Any | None: ...

    async def exists_by_unique_key(
        self, key: Any, *, exclude_id: int | None = None
    ) -> bool: ...

    async def insert(self, values: dict[str, Any]) -> int: ...

    async def update_by_id(self, record_id: int, values: dict[str, Any]) -> int: ...

    async def delete_by_id(self, record_id: int) -> int: ...


def merge_patch(
    current: dict[str, Any], patch: dict[str, Any], record_id: int
) -> dict[str, Any]:
    """Overlay ``patch`` onto ``current`` field by field.

    A patch value replaces the current one only when it differs and is not
    the zero value of its type. Fields unknown to ``current`` are ignored,
    and ``id`` is always taken from ``record_id``.
    """
    merged = dict(current)
    for field, value in patch.items():
        if field == "id" or field not in merged:
            continue
        if value != merged[field] and not is_zero_value(value):
            merged[field] = value
    merged["id"] = record_id
    return merged


async def list_records[DataT: RecordData](
    repo: Repository, data_cls: type[DataT]
) -> list[DataT]:
    return [data_cls.model_validate(record) for record in await repo.list_all()]


async def get_existing[DataT: RecordData](
    repo: Repository,
    record_id: int,
    data_cls: type[DataT],
    not_found_error: type[NotFoundError],
) -> DataT:
    record = await repo.get_by_id(record_id)
    if record is None:
        raise not_found_error(record_id)
    return data_cls.model_validate(record)


async def create_unique[DataT: RecordData](
    repo: Repository,
    candidate: BaseModel,
    data_cls: type[DataT],
    conflict_error: type[ConflictError],
) -> DataT:
    """Insert ``candidate`` unless its uniqueness key is already taken.

    Raises:
        conflict_error: If a record with the same key exists. Nothing is written.
    """
    values = candidate.model_dump()
    if repo.unique_field is not None:
        key = values[repo.unique_field]
        if await repo.exists_by_unique_key(key):
            logger.info(
                f"{repo.resource}.create.conflict",
                extra={"field": repo.unique_field, "key": key},
            )
            raise conflict_error(key)

    record_id = await repo.insert(values)
    logger.info(f"{repo.resource}.created", extra={"record_id": record_id})
    return data_cls(id=record_id, **values)


async def update_partial[DataT: RecordData](
    repo: Repository,
    record_id: int,
    patch: BaseModel,
    data_cls: type[DataT],
    not_found_error: type[NotFoundError],
    conflict_error: type[ConflictError] | None = None,
) -> DataT:
    """Merge ``patch`` into the stored record and persist the result.

    Raises:
        not_found_error: If no record has ``record_id``, before or during the
            write. No UPDATE is issued when the initial read finds nothing.
        conflict_error: If the merge moves the uniqueness key onto a key
            another record already holds.
    """
    current = await get_existing(repo, record_id, data_cls, not_found_error)
    current_values = current.model_dump()
    merged = merge_patch(current_values, patch.model_dump(), record_id)

    unique_field = repo.unique_field
    if (
        conflict_error is not None
        and unique_field is not None
        and merged[unique_field] != current_values[unique_field]
        and await repo.exists_by_unique_key(
            merged[unique_field], exclude_id=record_id
        )
    ):
        raise conflict_error(merged[unique_field])

    values = {field: value for field, value in merged.items() if field != "id"}
    if await repo.update_by_id(record_id, values) < 1:
        raise not_found_error(record_id)

    changed = sorted(
        field for field, value in values.items() if value != current_values[field]
    )
    logger.info(
        f"{repo.resource}.updated",
        extra={"record_id": record_id, "changed_fields": changed},
    )
    return data_cls(**merged)


async def delete_existing(
    repo: Repository, record_id: int, not_found_error: type[NotFoundError]
) -> None:
    """Delete a record that must exist. No DELETE is issued for unknown ids."""
    if await repo.get_by_id(record_id) is None:
        raise not_found_error(record_id)
    if await repo.delete_by_id(record_id) < 1:
        raise not_found_error(record_id)
    logger.info(f"{repo.resource}.deleted", extra={"record_id": record_id})


async def ensure_reference(
    probe: Awaitable[bool], error: ReferenceNotFoundError
) -> None:
    """Raise ``error`` unless the referenced parent exists."""
    if not await probe:
        raise error
