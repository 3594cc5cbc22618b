"""
employee_api.auth.gates

Request guards: authentication (bearer token) and authorization (group membership).

Responsibilities:
- Parse the authorization header and delegate token verification.
- Normalize verified claims into a `Principal`.
- Permit or deny a Principal based on group membership.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from employee_api.auth.models import AuthConfig, Principal
from employee_api.auth.verifier import TokenVerificationError, TokenVerifier
from employee_api.errors import Forbidden, Unauthenticated
from employee_api.observability.logging import get_logger

log = get_logger(__name__)

_BEARER = re.compile(r"^Bearer\s+(\S+)\s*$", re.IGNORECASE)

ADMIN_GROUP = "admin"


def extract_bearer_token(value: str | None) -> str:
    if value is None:
        raise Unauthenticated("missing credentials")
    match = _BEARER.match(value)
    if match is None:
        raise Unauthenticated("malformed credentials")
    return match.group(1)


class AuthenticationGate:
    def __init__(self, *, config: AuthConfig, verifier: TokenVerifier) -> None:
        # Startup-time invariant: refuse to build without issuer/client id.
        config.require_complete()
        self._config = config
        self._verifier = verifier

    @property
    def config(self) -> AuthConfig:
        return self._config

    async def authenticate(self, headers: Mapping[str, str]) -> Principal:
        token = extract_bearer_token(headers.get("authorization"))
        try:
            claims = await self._verifier.verify(token)
        except TokenVerificationError as e:
            log.info("authentication_failed", reason=str(e))
            raise Unauthenticated(f"Token verification failed: {e}") from e

        return Principal(subject=claims.sub, email=claims.email, groups=claims.groups)


class AuthorizationGate:
    def __init__(self, *, required_group: str = ADMIN_GROUP) -> None:
        self._required_group = required_group

    def authorize(self, principal: Principal | None) -> Principal:
        if principal is None:
            raise Forbidden("missing identity")
        if not principal.in_group(self._required_group):
            log.info(
                "authorization_denied",
                subject=principal.subject,
                required_group=self._required_group,
            )
            raise Forbidden("insufficient role")
        return principal


# --- Module Notes -----------------------------------------------------------
# The gates carry no per-request state. Their ordering is fixed by the FastAPI
# dependency graph in `auth.deps`, not here.
