"""
employee_api.db.repositories.employees

Repository for `Employee` entities.

Responsibilities:
- Find employees by id / email and list them.
- Insert, update and delete employee rows (flush only; callers commit).
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db.models import Employee, is_storable_id


class EmployeeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, employee_id: int) -> Employee | None:
        # An id outside the column range cannot name a row.
        if not is_storable_id(employee_id):
            return None
        return await self._session.get(Employee, employee_id)

    async def get_by_email(self, email: str) -> Employee | None:
        stmt = select(Employee).where(Employee.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_all(self) -> list[Employee]:
        stmt = select(Employee).order_by(Employee.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def insert(self, employee: Employee) -> Employee:
        # Flush populates the generated id on the passed record.
        self._session.add(employee)
        await self._session.flush()
        return employee

    async def update(self, employee: Employee) -> None:
        # Rows are keyed by primary key; the loaded record carries the merged values.
        self._session.add(employee)
        await self._session.flush()

    async def delete(self, employee_id: int) -> None:
        await self._session.execute(delete(Employee).where(Employee.id == employee_id))
