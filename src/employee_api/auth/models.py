"""
employee_api.auth.models

Auth domain models.

Responsibilities:
- Define the verified claims view returned by token verifiers.
- Define the authenticated identity type (`Principal`) attached to requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ClaimsError(ValueError):
    pass


class AuthConfigError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class AuthConfig:
    # Fixed at startup; the authentication gate never reads settings per request.
    issuer: str | None
    client_id: str | None
    audience: str = "api://default"

    def require_complete(self) -> None:
        if not self.issuer or not self.client_id:
            raise AuthConfigError(
                "Identity provider configuration is missing. "
                "Please set EMP_OKTA_ISSUER and EMP_OKTA_CLIENT_ID."
            )


@dataclass(frozen=True, slots=True)
class VerifiedClaims:
    sub: str
    email: str | None = None
    groups: frozenset[str] = frozenset()
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> VerifiedClaims:
        subject = str(payload.get("sub") or "")
        if not subject:
            raise ClaimsError("missing subject")

        groups_raw = payload.get("groups")
        if groups_raw is None:
            groups_raw = []
        if not isinstance(groups_raw, list):
            raise ClaimsError("groups claim must be a list")

        email = payload.get("email")
        return cls(
            sub=subject,
            email=str(email) if email is not None else None,
            groups=frozenset(str(g) for g in groups_raw),
            raw=payload,
        )


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.
    """

    subject: str
    email: str | None
    groups: frozenset[str]

    def in_group(self, group: str) -> bool:
        # Exact, case-sensitive membership.
        return group in self.groups


# --- Module Notes -----------------------------------------------------------
# Principal is request-scoped and never persisted.
