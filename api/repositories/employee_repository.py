"""Repository for employee operations."""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.engine import RowMapping

from models import Employee, InboundOrder
from repositories.base import CrudRepository
from repositories.utils import log_slow_query


class EmployeeRepository(CrudRepository[Employee]):
    model = Employee
    resource = "employee"
    unique_field = "card_number_id"

    @log_slow_query("employees.inbound_orders_report")
    async def inbound_orders_report(
        self, employee_id: int | None = None
    ) -> Sequence[RowMapping]:
        """Count inbound orders per employee.

        Inner join: employees with no inbound orders are not reported.

        Args:
            employee_id: Restrict the report to a single employee.
        """
        query = (
            select(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
                func.count(InboundOrder.id).label("inbound_orders_count"),
            )
            .join(InboundOrder, InboundOrder.employee_id == Employee.id)
            .group_by(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
            )
            .order_by(Employee.id)
        )
        if employee_id is not None:
            query = query.where(Employee.id == employee_id)

        result = await self.db.execute(query)
        return result.mappings().all()
