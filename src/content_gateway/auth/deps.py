"""
content_gateway.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Reject missing/invalid credentials before any authorization logic runs.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from content_gateway.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from content_gateway.auth.models import Principal, Role
from content_gateway.errors import Unauthenticated
from content_gateway.settings import Settings, get_settings

_bearer = HTTPBearer(auto_error=False)


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> Principal:
    # Authn: require a bearer token.
    if creds is None or not creds.credentials:
        raise Unauthenticated("Missing bearer token")

    try:
        cfg = JwtConfig.from_settings(settings)
        payload = decode_and_validate(cfg=cfg, token=creds.credentials)
    except JwtValidationError as e:
        raise Unauthenticated(f"Invalid token: {e}") from e

    # Normalize identity into our internal type.
    subject = str(payload.get("sub", ""))
    if not subject:
        raise Unauthenticated("Invalid token subject")
    try:
        role = Role(payload.get("role"))
    except ValueError as e:
        raise Unauthenticated("Invalid token role") from e

    return Principal(subject=subject, role=role)


# --- Module Notes -----------------------------------------------------------
# Role checks are not done here: each editorial action has its own rule in
# `editorial.policy`, some of which also need the resource owner.
