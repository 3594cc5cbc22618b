"""
employee_api.api.routers.employees

Employee CRUD endpoints.

Responsibilities:
- Create employees (admin group only: authentication then authorization).
- List, read, update and delete employees.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from employee_api.api.deps import employee_service
from employee_api.auth.deps import require_group
from employee_api.auth.gates import ADMIN_GROUP
from employee_api.schemas import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from employee_api.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post(
    "",
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(require_group(ADMIN_GROUP))],
)
async def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(employee_service),
) -> EmployeeResponse:
    employee = await service.create(body)
    return EmployeeResponse.model_validate(employee)


@router.get("")
async def list_employees(
    service: EmployeeService = Depends(employee_service),
) -> list[EmployeeResponse]:
    return [EmployeeResponse.model_validate(e) for e in await service.find_all()]


@router.get("/{employee_id}")
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(employee_service),
) -> EmployeeResponse:
    return EmployeeResponse.model_validate(await service.find_one(employee_id))


@router.put("/{employee_id}")
async def update_employee(
    employee_id: int,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(employee_service),
) -> EmployeeResponse:
    return EmployeeResponse.model_validate(await service.update(employee_id, body))


@router.delete("/{employee_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(employee_service),
) -> Response:
    await service.remove(employee_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
