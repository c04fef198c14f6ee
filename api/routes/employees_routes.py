"""Employee CRUD endpoints and the inbound-order count report.

Route ordering note: /reportInboundOrders is defined before /{employee_id}
so the literal segment is not parsed as an id.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response

from core.database import DbSession
from schemas import (
    EmployeeCreate,
    EmployeeData,
    EmployeeInboundOrdersReport,
    EmployeeUpdate,
)
from services.employees_service import (
    CardNumberExistsError,
    EmployeeNotFoundError,
    create_employee,
    delete_employee,
    employee_inbound_orders_report,
    get_employee,
    inbound_orders_report,
    list_employees,
    update_employee,
)

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeData])
async def list_employees_endpoint(db: DbSession) -> list[EmployeeData]:
    return await list_employees(db)


@router.get(
    "/reportInboundOrders",
    response_model=list[EmployeeInboundOrdersReport] | EmployeeInboundOrdersReport,
    responses={404: {"description": "Employee not found or without orders"}},
)
async def report_inbound_orders_endpoint(
    db: DbSession,
    employee_id: Annotated[int | None, Query(alias="id")] = None,
) -> list[EmployeeInboundOrdersReport] | EmployeeInboundOrdersReport:
    """Count inbound orders per employee, or for one employee with ?id=."""
    if employee_id is None:
        return await inbound_orders_report(db)
    try:
        return await employee_inbound_orders_report(db, employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/{employee_id}",
    response_model=EmployeeData,
    responses={404: {"description": "Employee not found"}},
)
async def get_employee_endpoint(employee_id: int, db: DbSession) -> EmployeeData:
    try:
        return await get_employee(db, employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=EmployeeData,
    status_code=201,
    responses={409: {"description": "Card number already exists"}},
)
async def create_employee_endpoint(
    body: EmployeeCreate, db: DbSession
) -> EmployeeData:
    try:
        return await create_employee(db, body)
    except CardNumberExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch(
    "/{employee_id}",
    response_model=EmployeeData,
    responses={
        404: {"description": "Employee not found"},
        409: {"description": "Card number already exists"},
    },
)
async def update_employee_endpoint(
    employee_id: int, body: EmployeeUpdate, db: DbSession
) -> EmployeeData:
    """Partially update an employee. Empty or zero fields are left unchanged."""
    try:
        return await update_employee(db, employee_id, body)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CardNumberExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{employee_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Employee not found"}},
)
async def delete_employee_endpoint(employee_id: int, db: DbSession) -> None:
    try:
        await delete_employee(db, employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
