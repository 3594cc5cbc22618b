"""
employee_api.api.app

FastAPI app factory for the employee service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Build the authentication gate (fails fast on missing identity provider config).
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api import __version__
from employee_api.api.routers.departments import router as departments_router
from employee_api.api.routers.dev_auth import router as dev_auth_router
from employee_api.api.routers.employees import router as employees_router
from employee_api.api.routers.health import router as health_router
from employee_api.auth.deps import build_authentication_gate
from employee_api.db.init_db import init_db
from employee_api.db.session import create_engine, create_sessionmaker
from employee_api.errors import register_exception_handlers
from employee_api.observability.logging import configure_logging, get_logger
from employee_api.observability.middleware import RequestContextMiddleware
from employee_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    # Raises AuthConfigError before the app is returned if issuer/client id are unset.
    gate = build_authentication_gate(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, verifier=settings.auth_verifier)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.should_create_tables:
            # Dev/test convenience. Prod should use Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Employee Management API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.authentication_gate = gate

    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(employees_router, prefix=settings.api_prefix)
    app.include_router(departments_router, prefix=settings.api_prefix)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; business rules live in services, guards in `auth`.
