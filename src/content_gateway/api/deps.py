"""
content_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the upstream client and editorial service.
- Encapsulate app.state access patterns (shared httpx client).
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from content_gateway.cms_client.content_http import CmsClient
from content_gateway.services.editorial_service import EditorialService


def cms_http_from_app(request: Request) -> httpx.AsyncClient:
    # The client is created on app startup in `content_gateway.api.app.create_app`.
    return request.app.state.cms_http  # type: ignore[attr-defined]


def editorial_service(http: httpx.AsyncClient = Depends(cms_http_from_app)) -> EditorialService:
    # Request-scoped service over the shared connection pool.
    return EditorialService(cms=CmsClient(http=http))


# --- Module Notes -----------------------------------------------------------
# Tests override `cms_http_from_app` indirectly by passing a mock transport to
# `create_app`; the dependency graph itself stays unchanged.
