"""
content_gateway.errors

Gateway error taxonomy.

Responsibilities:
- Define the exceptions surfaced by the editorial flow (authn, authz, lookup, upstream).
- Carry a stable error code and HTTP status so the API layer can render them uniformly.
"""

from __future__ import annotations

from typing import Any

from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)


class GatewayError(Exception):
    """
    Base class for errors that map to a client-visible error envelope.
    """

    code: str = "INTERNAL_SERVER_ERROR"
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(
        self, message: str | None = None, *, details: dict[str, Any] | None = None
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "statusCode": self.status_code,
        }
        if self.details:
            body["details"] = self.details
        return body


class Unauthenticated(GatewayError):
    code = "AUTHENTICATION_ERROR"
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class Denied(GatewayError):
    code = "FORBIDDEN"
    status_code = HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class ResourceNotFound(GatewayError):
    code = "NOT_FOUND"
    status_code = HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class UpstreamUnavailable(GatewayError):
    code = "UPSTREAM_UNAVAILABLE"
    status_code = HTTP_502_BAD_GATEWAY
    default_message = "Content service unavailable"


# --- Module Notes -----------------------------------------------------------
# `ResourceNotFound` and `Denied` must stay distinct: "cannot determine ownership"
# is not the same outcome as "ownership check failed".
