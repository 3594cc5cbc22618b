"""
employee_api.auth.verifier

Identity token verification.

Responsibilities:
- Verify identity-provider access tokens (RS256, keys from the provider JWKS).
- Verify and issue shared-secret tokens for local/dev scenarios and tests.
- Return a typed `VerifiedClaims` view; every failure is a `TokenVerificationError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

import jwt
from jwt import PyJWKClient, PyJWTError
from starlette.concurrency import run_in_threadpool

from employee_api.auth.models import AuthConfig, ClaimsError, VerifiedClaims

_REQUIRED_CLAIMS = ["exp", "iat", "iss", "aud", "sub"]


class TokenVerificationError(Exception):
    pass


class TokenVerifier(Protocol):
    async def verify(self, token: str) -> VerifiedClaims: ...


class SigningKeySource(Protocol):
    # Satisfied by `jwt.PyJWKClient`.
    def get_signing_key_from_jwt(self, token: str) -> Any: ...


def default_jwks_uri(issuer: str) -> str:
    # Okta authorization servers publish their keys under `{issuer}/v1/keys`.
    return issuer.rstrip("/") + "/v1/keys"


def _to_claims(payload: dict[str, Any], *, client_id: str | None) -> VerifiedClaims:
    # Access tokens carry the client they were issued to in `cid`.
    cid = payload.get("cid")
    if client_id and cid is not None and cid != client_id:
        raise TokenVerificationError("Token was not issued to this client")
    try:
        return VerifiedClaims.from_payload(payload)
    except ClaimsError as e:
        raise TokenVerificationError(f"Invalid claims: {e}") from e


class JwksTokenVerifier:
    """
    Verifies RS256 access tokens issued by the identity provider.

    Signing keys are resolved from the provider's JWKS endpoint and cached by the
    key source. Resolving a key can block on the network, so it runs in the threadpool.
    """

    def __init__(
        self,
        *,
        config: AuthConfig,
        jwks_uri: str | None = None,
        timeout_seconds: float = 10.0,
        key_source: SigningKeySource | None = None,
        algorithms: Iterable[str] = ("RS256",),
        leeway_seconds: int = 0,
    ) -> None:
        config.require_complete()
        self._config = config
        self._algorithms = list(algorithms)
        self._leeway = leeway_seconds
        self._keys = key_source or PyJWKClient(
            jwks_uri or default_jwks_uri(config.issuer or ""),
            cache_keys=True,
            timeout=timeout_seconds,
        )

    def _verify_sync(self, token: str) -> VerifiedClaims:
        try:
            signing_key = self._keys.get_signing_key_from_jwt(token).key
        except PyJWTError as e:
            raise TokenVerificationError(f"Unable to resolve signing key: {e}") from e

        try:
            payload = jwt.decode(
                token,
                signing_key,
                algorithms=self._algorithms,
                issuer=self._config.issuer,
                audience=self._config.audience,
                leeway=self._leeway,
                options={"require": _REQUIRED_CLAIMS},
            )
        except PyJWTError as e:
            raise TokenVerificationError(str(e)) from e
        return _to_claims(payload, client_id=self._config.client_id)

    async def verify(self, token: str) -> VerifiedClaims:
        return await run_in_threadpool(self._verify_sync, token)


@dataclass(frozen=True, slots=True)
class SharedSecret:
    alg: str
    secret: str


class SharedSecretTokenVerifier:
    """
    HS256 tokens for dev/test; claims are checked exactly like provider tokens.
    """

    def __init__(self, *, config: AuthConfig, key: SharedSecret) -> None:
        config.require_complete()
        self._config = config
        self._key = key

    async def verify(self, token: str) -> VerifiedClaims:
        try:
            payload = jwt.decode(
                token,
                self._key.secret,
                algorithms=[self._key.alg],
                issuer=self._config.issuer,
                audience=self._config.audience,
                options={"require": _REQUIRED_CLAIMS},
            )
        except PyJWTError as e:
            raise TokenVerificationError(str(e)) from e
        return _to_claims(payload, client_id=self._config.client_id)


def issue_token(
    *,
    config: AuthConfig,
    key: SharedSecret,
    subject: str,
    email: str | None = None,
    groups: list[str] | None = None,
    ttl: timedelta = timedelta(hours=1),
) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": config.issuer,
        "aud": config.audience,
        "cid": config.client_id,
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    if email is not None:
        payload["email"] = email
    if groups is not None:
        payload["groups"] = groups
    return jwt.encode(payload, key.secret, algorithm=key.alg)


# --- Module Notes -----------------------------------------------------------
# Token issuing is used by `api/routers/dev_auth.py` and by the test suite; it only
# ever produces shared-secret tokens.
