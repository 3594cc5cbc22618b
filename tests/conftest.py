"""
tests.conftest

Shared fixtures: settings, an in-memory store, an in-process HTTP client and token helpers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from employee_api.api.app import create_app
from employee_api.auth.models import AuthConfig
from employee_api.auth.verifier import SharedSecret, issue_token
from employee_api.db.init_db import init_db
from employee_api.db.session import create_sessionmaker
from employee_api.settings import Settings

ISSUER = "https://idp.example.com/oauth2/default"
CLIENT_ID = "0oa-test-client"
AUDIENCE = "api://default"
SECRET = "test-secret-0123456789abcdef0123456789"

AUTH_CONFIG = AuthConfig(issuer=ISSUER, client_id=CLIENT_ID, audience=AUDIENCE)
KEY = SharedSecret(alg="HS256", secret=SECRET)

JOHN = {
    "name": "John Doe",
    "email": "john@test.com",
    "salary": 50000,
    "dateOfBirth": "1990-01-15",
    "mobileNumber": 1234567890,
    "departmentId": 1,
}


def make_token(*, groups: list[str] | None = None, subject: str = "00u-test-user") -> str:
    return issue_token(
        config=AUTH_CONFIG,
        key=KEY,
        subject=subject,
        email="caller@example.com",
        groups=groups,
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "env": "test",
        "log_json": False,
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}",
        "auth_verifier": "shared_secret",
        "okta_issuer": ISSUER,
        "okta_client_id": CLIENT_ID,
        "okta_audience": AUDIENCE,
        "dev_jwt_secret": SECRET,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer(make_token(groups=["users", "admin"]))


@pytest.fixture
def user_headers() -> dict[str, str]:
    return bearer(make_token(groups=["users"]))


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    # StaticPool keeps a single in-memory SQLite connection alive for the whole test.
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
