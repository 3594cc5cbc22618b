from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db.models import Department, is_storable_id


class DepartmentRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, department_id: int) -> Department | None:
        # An id outside the column range cannot name a row.
        if not is_storable_id(department_id):
            return None
        return await self._session.get(Department, department_id)

    async def get_by_name(self, name: str) -> Department | None:
        stmt = select(Department).where(Department.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_all(self) -> list[Department]:
        stmt = select(Department).order_by(Department.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def insert(self, department: Department) -> Department:
        self._session.add(department)
        await self._session.flush()
        return department

    async def update(self, department: Department) -> None:
        self._session.add(department)
        await self._session.flush()

    async def delete(self, department_id: int) -> None:
        await self._session.execute(delete(Department).where(Department.id == department_id))
