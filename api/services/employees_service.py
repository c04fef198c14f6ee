"""Employee business logic and the inbound-order count report."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.employee_repository import EmployeeRepository
from schemas import (
    EmployeeCreate,
    EmployeeData,
    EmployeeInboundOrdersReport,
    EmployeeUpdate,
)
from services import crud
from services.errors import ConflictError, NotFoundError


class EmployeeNotFoundError(NotFoundError):
    resource = "employee"


class CardNumberExistsError(ConflictError):
    resource = "employee"
    field = "card_number_id"


async def list_employees(db: AsyncSession) -> list[EmployeeData]:
    return await crud.list_records(EmployeeRepository(db), EmployeeData)


async def get_employee(db: AsyncSession, employee_id: int) -> EmployeeData:
    return await crud.get_existing(
        EmployeeRepository(db), employee_id, EmployeeData, EmployeeNotFoundError
    )


async def create_employee(db: AsyncSession, employee: EmployeeCreate) -> EmployeeData:
    """Create an employee.

    Raises:
        CardNumberExistsError: If the card_number_id is already in use.
    """
    return await crud.create_unique(
        EmployeeRepository(db), employee, EmployeeData, CardNumberExistsError
    )


async def update_employee(
    db: AsyncSession, employee_id: int, patch: EmployeeUpdate
) -> EmployeeData:
    """Apply a partial update to an employee.

    Fields left empty or zero in ``patch`` keep their stored value.

    Raises:
        EmployeeNotFoundError: If no employee has ``employee_id``.
        CardNumberExistsError: If the new card_number_id belongs to another
            employee.
    """
    return await crud.update_partial(
        EmployeeRepository(db),
        employee_id,
        patch,
        EmployeeData,
        EmployeeNotFoundError,
        CardNumberExistsError,
    )


async def delete_employee(db: AsyncSession, employee_id: int) -> None:
    await crud.delete_existing(
        EmployeeRepository(db), employee_id, EmployeeNotFoundError
    )


async def inbound_orders_report(db: AsyncSession) -> list[EmployeeInboundOrdersReport]:
    rows = await EmployeeRepository(db).inbound_orders_report()
    return [EmployeeInboundOrdersReport.model_validate(dict(row)) for row in rows]


async def employee_inbound_orders_report(
    db: AsyncSession, employee_id: int
) -> EmployeeInboundOrdersReport:
    """Inbound-order count for one employee.

    Raises:
        EmployeeNotFoundError: If the employee does not exist or has no
            inbound orders.
    """
    rows = await EmployeeRepository(db).inbound_orders_report(employee_id)
    if not rows:
        raise EmployeeNotFoundError(employee_id)
    return EmployeeInboundOrdersReport.model_validate(dict(rows[0]))
