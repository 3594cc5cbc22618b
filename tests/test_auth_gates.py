"""
tests.test_auth_gates

Authentication gate (header parsing + verifier delegation) and authorization gate
(exact `admin` group membership).
"""

from __future__ import annotations

import pytest
from starlette.datastructures import Headers

from employee_api.auth.gates import AuthenticationGate, AuthorizationGate, extract_bearer_token
from employee_api.auth.models import AuthConfig, AuthConfigError, Principal, VerifiedClaims
from employee_api.auth.verifier import TokenVerificationError
from employee_api.errors import Forbidden, Unauthenticated

CONFIG = AuthConfig(issuer="https://idp.example.com/oauth2/default", client_id="0oa-client")


class FakeVerifier:
    def __init__(
        self,
        *,
        claims: VerifiedClaims | None = None,
        error: Exception | None = None,
    ) -> None:
        self.claims = claims or VerifiedClaims(sub="00u-1", email="a@example.com")
        self.error = error
        self.tokens: list[str] = []

    async def verify(self, token: str) -> VerifiedClaims:
        self.tokens.append(token)
        if self.error is not None:
            raise self.error
        return self.claims


def _principal(groups: list[str]) -> Principal:
    return Principal(subject="00u-1", email=None, groups=frozenset(groups))


@pytest.mark.asyncio
async def test_missing_authorization_header_is_unauthenticated() -> None:
    verifier = FakeVerifier()
    gate = AuthenticationGate(config=CONFIG, verifier=verifier)

    with pytest.raises(Unauthenticated) as exc:
        await gate.authenticate({})

    assert exc.value.detail == "missing credentials"
    assert verifier.tokens == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "value",
    ["", "Bearer", "Bearer ", "Bearer    ", "invalid-token-format", "Basic abc123", "Bearer a b"],
)
async def test_malformed_authorization_header_is_unauthenticated(value: str) -> None:
    verifier = FakeVerifier()
    gate = AuthenticationGate(config=CONFIG, verifier=verifier)

    with pytest.raises(Unauthenticated) as exc:
        await gate.authenticate({"authorization": value})

    assert exc.value.detail == "malformed credentials"
    assert verifier.tokens == []


@pytest.mark.parametrize("value", ["Bearer tok.en", "bearer tok.en", "BEARER   tok.en  "])
def test_bearer_scheme_is_case_insensitive(value: str) -> None:
    assert extract_bearer_token(value) == "tok.en"


@pytest.mark.asyncio
async def test_valid_token_attaches_principal() -> None:
    claims = VerifiedClaims(sub="00u-42", email="jane@example.com", groups=frozenset({"admin"}))
    verifier = FakeVerifier(claims=claims)
    gate = AuthenticationGate(config=CONFIG, verifier=verifier)

    principal = await gate.authenticate(Headers({"Authorization": "Bearer abc.def.ghi"}))

    assert verifier.tokens == ["abc.def.ghi"]
    assert principal == Principal(
        subject="00u-42", email="jane@example.com", groups=frozenset({"admin"})
    )


@pytest.mark.asyncio
async def test_groups_default_to_empty_when_claim_absent() -> None:
    claims = VerifiedClaims.from_payload({"sub": "00u-7", "email": "x@example.com"})
    gate = AuthenticationGate(config=CONFIG, verifier=FakeVerifier(claims=claims))

    principal = await gate.authenticate({"authorization": "Bearer t"})

    assert principal.groups == frozenset()


@pytest.mark.asyncio
async def test_verifier_failure_is_wrapped_not_swallowed() -> None:
    cause = TokenVerificationError("Signature has expired")
    gate = AuthenticationGate(config=CONFIG, verifier=FakeVerifier(error=cause))

    with pytest.raises(Unauthenticated) as exc:
        await gate.authenticate({"authorization": "Bearer expired"})

    assert exc.value.detail == "Token verification failed: Signature has expired"
    assert exc.value.__cause__ is cause


@pytest.mark.parametrize(
    "config",
    [
        AuthConfig(issuer=None, client_id="0oa-client"),
        AuthConfig(issuer="https://idp.example.com", client_id=None),
        AuthConfig(issuer="", client_id=""),
    ],
)
def test_gate_construction_fails_fast_without_issuer_or_client_id(config: AuthConfig) -> None:
    with pytest.raises(AuthConfigError):
        AuthenticationGate(config=config, verifier=FakeVerifier())


@pytest.mark.parametrize("groups", [[], ["Admin"], ["users"], ["ADMIN", "editors"]])
def test_authorize_rejects_principal_without_exact_admin_group(groups: list[str]) -> None:
    with pytest.raises(Forbidden) as exc:
        AuthorizationGate().authorize(_principal(groups))

    assert exc.value.detail == "insufficient role"


def test_authorize_rejects_principal_whose_claims_omitted_groups() -> None:
    claims = VerifiedClaims.from_payload({"sub": "00u-1"})
    principal = Principal(subject=claims.sub, email=claims.email, groups=claims.groups)

    with pytest.raises(Forbidden):
        AuthorizationGate().authorize(principal)


def test_authorize_accepts_admin_anywhere_in_groups() -> None:
    principal = _principal(["users", "admin", "editors"])

    assert AuthorizationGate().authorize(principal) is principal


def test_authorize_without_principal_is_forbidden_not_unauthenticated() -> None:
    with pytest.raises(Forbidden) as exc:
        AuthorizationGate().authorize(None)

    assert not isinstance(exc.value, Unauthenticated)
    assert exc.value.detail == "missing identity"
    assert exc.value.status_code == 403


def test_authorize_honours_configured_group() -> None:
    gate = AuthorizationGate(required_group="hr")

    assert gate.authorize(_principal(["hr"])).subject == "00u-1"
    with pytest.raises(Forbidden):
        gate.authorize(_principal(["admin"]))
