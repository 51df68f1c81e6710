"""
content_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Strict env-driven configuration with defaults safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="CG_", case_sensitive=False)

    # Environment controls toggle behavior like the dev token endpoint.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "content-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "content-gateway"
    jwt_audience: str = "content-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Upstream content store
    cms_api_url: str = "http://localhost:3000"
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    # CORS
    allowed_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `allowed_origins` is parsed from a JSON list in the environment, e.g.
# CG_ALLOWED_ORIGINS='["https://admin.example.com"]'.
