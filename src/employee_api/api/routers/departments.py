"""
employee_api.api.routers.departments

Department CRUD endpoints (unguarded).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from employee_api.api.deps import department_service
from employee_api.schemas import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from employee_api.services.department_service import DepartmentService

router = APIRouter(prefix="/departments", tags=["departments"])


@router.post("", status_code=HTTP_201_CREATED)
async def create_department(
    body: DepartmentCreate,
    service: DepartmentService = Depends(department_service),
) -> DepartmentResponse:
    return DepartmentResponse.model_validate(await service.create(body))


@router.get("")
async def list_departments(
    service: DepartmentService = Depends(department_service),
) -> list[DepartmentResponse]:
    return [DepartmentResponse.model_validate(d) for d in await service.find_all()]


@router.get("/{department_id}")
async def get_department(
    department_id: int,
    service: DepartmentService = Depends(department_service),
) -> DepartmentResponse:
    return DepartmentResponse.model_validate(await service.find_one(department_id))


@router.put("/{department_id}")
async def update_department(
    department_id: int,
    body: DepartmentUpdate,
    service: DepartmentService = Depends(department_service),
) -> DepartmentResponse:
    return DepartmentResponse.model_validate(await service.update(department_id, body))


@router.delete("/{department_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_department(
    department_id: int,
    service: DepartmentService = Depends(department_service),
) -> Response:
    await service.remove(department_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
