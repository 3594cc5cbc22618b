"""
employee_api.services.employee_service

Employee mutation service.

Responsibilities:
- Create employees after an email uniqueness check.
- Read employees (all / by id) with not-found semantics.
- Apply partial updates (keeping emails unique) and deletes to existing employees only.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db.models import Employee
from employee_api.db.repositories.employees import EmployeeRepo
from employee_api.errors import Conflict, NotFound
from employee_api.observability.logging import get_logger
from employee_api.schemas import EmployeeCreate, EmployeeUpdate, parse_iso_date
from employee_api.services.patching import merge_fields

log = get_logger(__name__)

EMPLOYEE_MUTABLE_FIELDS = (
    "name",
    "email",
    "salary",
    "date_of_birth",
    "mobile_number",
    "department_id",
)


class EmployeeService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._employees = EmployeeRepo(session)

    async def create(self, data: EmployeeCreate) -> Employee:
        existing = await self._employees.get_by_email(data.email)
        if existing is not None:
            log.warning("employee_create_rejected", reason="duplicate_email")
            raise Conflict("Employee with this email already exists")

        employee = Employee(
            name=data.name,
            email=data.email,
            salary=data.salary,
            date_of_birth=parse_iso_date(data.date_of_birth),
            mobile_number=data.mobile_number,
            department_id=data.department_id,
        )
        await self._employees.insert(employee)
        await self._session.commit()
        log.info("employee_created", employee_id=employee.id)
        return employee

    async def find_all(self) -> list[Employee]:
        return await self._employees.list_all()

    async def find_one(self, employee_id: int) -> Employee:
        employee = await self._employees.get(employee_id)
        if employee is None:
            raise NotFound("Employee not found")
        return employee

    async def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        employee = await self.find_one(employee_id)

        changes = patch.changes()
        if "email" in changes:
            holder = await self._employees.get_by_email(changes["email"])
            if holder is not None and holder.id != employee_id:
                log.warning(
                    "employee_update_rejected", employee_id=employee_id, reason="duplicate_email"
                )
                raise Conflict("Employee with this email already exists")
        if "date_of_birth" in changes:
            changes["date_of_birth"] = parse_iso_date(changes["date_of_birth"])
        applied = merge_fields(employee, changes, fields=EMPLOYEE_MUTABLE_FIELDS)

        await self._employees.update(employee)
        await self._session.commit()
        log.info("employee_updated", employee_id=employee_id, fields=applied)
        # The merged in-memory record is returned; the row is not re-read.
        return employee

    async def remove(self, employee_id: int) -> None:
        await self.find_one(employee_id)
        await self._employees.delete(employee_id)
        await self._session.commit()
        log.info("employee_deleted", employee_id=employee_id)


# --- Module Notes -----------------------------------------------------------
# The duplicate checks and the writes are not atomic; the unique constraint on
# `employees.email` rejects the loser of a concurrent create or update.
