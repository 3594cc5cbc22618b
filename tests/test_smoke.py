"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.

Responsibilities:
- Ensure the FastAPI app starts and DB readiness probe works in test mode.
- Ensure dev tokens minted by the app are accepted by its own guards.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from employee_api.api.app import create_app

from conftest import JOHN, make_settings


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_dev_token_grants_admin_create(client: httpx.AsyncClient) -> None:
    r = await client.post("/v1/dev/token", json={"subject": "dev-admin", "groups": ["admin"]})
    assert r.status_code == 200
    token = r.json()["access_token"]

    r = await client.post("/employees", json=JOHN, headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 201


@pytest.mark.asyncio
async def test_dev_token_endpoint_hidden_in_prod(tmp_path: Path) -> None:
    settings = make_settings(tmp_path, env="prod", auth_verifier="jwks", db_auto_create=True)
    app = create_app(settings=settings)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post("/v1/dev/token", json={"subject": "x"})
            assert r.status_code == 404


def test_table_creation_defaults_by_env(tmp_path: Path) -> None:
    assert make_settings(tmp_path, env="test").should_create_tables
    assert not make_settings(tmp_path, env="prod").should_create_tables
    assert make_settings(tmp_path, env="prod", db_auto_create=True).should_create_tables


# --- Module Notes -----------------------------------------------------------
# The JWKS verifier is covered in test_token_verifier with a local signing key.
