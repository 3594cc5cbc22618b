"""
employee_api.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Build the authentication gate from settings (once, at app creation).
- Run the gate per request and attach the `Principal` to the request state.
- Enforce group membership via reusable dependency factories.
"""

from __future__ import annotations

from fastapi import Depends, Request

from employee_api.auth.gates import AuthenticationGate, AuthorizationGate
from employee_api.auth.models import AuthConfig, AuthConfigError, Principal
from employee_api.auth.verifier import (
    JwksTokenVerifier,
    SharedSecret,
    SharedSecretTokenVerifier,
    TokenVerifier,
)
from employee_api.settings import Settings


def auth_config(settings: Settings) -> AuthConfig:
    return AuthConfig(
        issuer=settings.okta_issuer,
        client_id=settings.okta_client_id,
        audience=settings.okta_audience,
    )


def shared_secret(settings: Settings) -> SharedSecret:
    return SharedSecret(alg=settings.dev_jwt_alg, secret=settings.dev_jwt_secret)


def build_authentication_gate(settings: Settings) -> AuthenticationGate:
    config = auth_config(settings)
    # Fail fast before touching the verifier.
    config.require_complete()
    if settings.env == "prod" and settings.auth_verifier == "shared_secret":
        raise AuthConfigError("shared_secret token verification is not allowed in prod")

    verifier: TokenVerifier
    if settings.auth_verifier == "shared_secret":
        verifier = SharedSecretTokenVerifier(config=config, key=shared_secret(settings))
    else:
        verifier = JwksTokenVerifier(
            config=config,
            jwks_uri=settings.okta_jwks_uri,
            timeout_seconds=settings.jwks_timeout_seconds,
        )
    return AuthenticationGate(config=config, verifier=verifier)


def authentication_gate(request: Request) -> AuthenticationGate:
    # Built in `employee_api.api.app.create_app`.
    return request.app.state.authentication_gate  # type: ignore[attr-defined]


async def authenticated_principal(
    request: Request,
    gate: AuthenticationGate = Depends(authentication_gate),
) -> Principal:
    principal = await gate.authenticate(request.headers)
    request.state.principal = principal
    return principal


def require_group(group: str):
    gate = AuthorizationGate(required_group=group)

    def _dep(request: Request, _: Principal = Depends(authenticated_principal)) -> Principal:
        # Authz reads the identity from the request context, as attached by authn.
        return gate.authorize(getattr(request.state, "principal", None))

    return _dep


# --- Module Notes -----------------------------------------------------------
# `require_group` depends on `authenticated_principal`, so authentication always
# runs first for any route guarded by group membership.
