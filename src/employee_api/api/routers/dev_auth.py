"""
employee_api.api.routers.dev_auth

Dev-only token minting for the shared-secret verifier.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from employee_api.api.deps import settings_dep
from employee_api.auth.deps import auth_config, shared_secret
from employee_api.auth.verifier import issue_token
from employee_api.errors import NotFound
from employee_api.settings import Settings

router = APIRouter(prefix="/v1/dev", tags=["dev"])


class DevTokenRequest(BaseModel):
    subject: str = Field(min_length=1, max_length=256)
    email: str | None = None
    groups: list[str] = Field(default_factory=list)
    ttl_minutes: int = Field(default=60, ge=1, le=24 * 60)


class DevTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/token", response_model=DevTokenResponse)
async def mint_dev_token(
    body: DevTokenRequest,
    settings: Settings = Depends(settings_dep),
) -> DevTokenResponse:
    # Only meaningful when the app trusts shared-secret tokens, and never in prod.
    if settings.env == "prod" or settings.auth_verifier != "shared_secret":
        raise NotFound()

    token = issue_token(
        config=auth_config(settings),
        key=shared_secret(settings),
        subject=body.subject,
        email=body.email,
        groups=body.groups,
        ttl=timedelta(minutes=body.ttl_minutes),
    )
    return DevTokenResponse(access_token=token)
