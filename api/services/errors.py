"""Domain errors raised by the service layer.

Routes map each family to a status code; services never format HTTP
responses. Store failures are not wrapped: any SQLAlchemyError propagates
to the application's global exception handler.
"""

from typing import Any


class ServiceError(Exception):
    """Base class for classified service errors."""


class NotFoundError(ServiceError):
    """No record exists for the requested id."""

    resource = "record"

    def __init__(self, record_id: int | None = None, message: str | None = None):
        self.record_id = record_id
        if message is None:
            message = f"{self.resource} not found"
            if record_id is not None:
                message = f"{self.resource} {record_id} not found"
        super().__init__(message)


class ConflictError(ServiceError):
    """A record with the same uniqueness key already exists."""

    resource = "record"
    field = "key"

    def __init__(self, key: Any, message: str | None = None):
        self.key = key
        super().__init__(
            message or f"{self.resource} with {self.field} {key!r} already exists"
        )


class ReferenceNotFoundError(ServiceError):
    """A dependent record names a parent that does not exist."""


class InvalidTemporalValueError(ServiceError):
    """A date or time field holds a value the domain rejects."""
