"""
employee_api.services.department_service

Department mutation service: name-unique create, reads, rename and delete.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db.models import Department
from employee_api.db.repositories.departments import DepartmentRepo
from employee_api.errors import Conflict, NotFound
from employee_api.observability.logging import get_logger
from employee_api.schemas import DepartmentCreate, DepartmentUpdate
from employee_api.services.patching import merge_fields

log = get_logger(__name__)

DEPARTMENT_MUTABLE_FIELDS = ("name",)


class DepartmentService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._departments = DepartmentRepo(session)

    async def _ensure_name_free(self, name: str, *, exclude_id: int | None = None) -> None:
        existing = await self._departments.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            log.warning("department_rejected", reason="duplicate_name")
            raise Conflict("Department with this name already exists")

    async def create(self, data: DepartmentCreate) -> Department:
        await self._ensure_name_free(data.name)

        department = Department(name=data.name)
        await self._departments.insert(department)
        await self._session.commit()
        log.info("department_created", department_id=department.id)
        return department

    async def find_all(self) -> list[Department]:
        return await self._departments.list_all()

    async def find_one(self, department_id: int) -> Department:
        department = await self._departments.get(department_id)
        if department is None:
            raise NotFound("Department not found")
        return department

    async def update(self, department_id: int, patch: DepartmentUpdate) -> Department:
        department = await self.find_one(department_id)

        changes = patch.changes()
        if "name" in changes:
            await self._ensure_name_free(changes["name"], exclude_id=department_id)
        applied = merge_fields(department, changes, fields=DEPARTMENT_MUTABLE_FIELDS)

        await self._departments.update(department)
        await self._session.commit()
        log.info("department_updated", department_id=department_id, fields=applied)
        return department

    async def remove(self, department_id: int) -> None:
        await self.find_one(department_id)
        await self._departments.delete(department_id)
        await self._session.commit()
        log.info("department_deleted", department_id=department_id)
