"""
employee_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and services.
- Encapsulate app.state access patterns (engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from employee_api.services.department_service import DepartmentService
from employee_api.services.employee_service import EmployeeService
from employee_api.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The settings the app was built with (not re-read from the environment).
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `employee_api.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


def employee_service(session: AsyncSession = Depends(db_session)) -> EmployeeService:
    return EmployeeService(session=session)


def department_service(session: AsyncSession = Depends(db_session)) -> DepartmentService:
    return DepartmentService(session=session)
