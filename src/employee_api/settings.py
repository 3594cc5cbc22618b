"""
employee_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., dev JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `EMP_`).
    Defaults are safe for local dev; identity provider settings have no defaults.
    """

    model_config = SettingsConfigDict(env_prefix="EMP_", env_file=".env", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "employee-api"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    # Global route prefix, e.g. "/api". Empty mounts routes at the root.
    api_prefix: str = ""
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./employees.db"
    # None means "create tables in dev/test only".
    db_auto_create: bool | None = None

    # Identity provider
    auth_verifier: Literal["jwks", "shared_secret"] = "jwks"
    okta_issuer: str | None = None
    okta_client_id: str | None = None
    okta_audience: str = "api://default"
    okta_jwks_uri: str | None = None
    jwks_timeout_seconds: float = 10.0

    # Shared-secret tokens (dev/test only)
    dev_jwt_alg: str = "HS256"
    dev_jwt_secret: str = Field(default="dev-secret-change-me-0123456789abcdef", repr=False)

    @property
    def should_create_tables(self) -> bool:
        if self.db_auto_create is not None:
            return self.db_auto_create
        return self.env in ("dev", "test")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Identity provider settings are validated when the authentication gate is built
# (see `auth.gates.AuthenticationGate`), so a misconfigured process fails at startup.
