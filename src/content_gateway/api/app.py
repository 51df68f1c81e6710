"""
content_gateway.api.app

FastAPI app factory for the Content Gateway service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/exception handlers.
- Create and close the shared upstream HTTP client.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_gateway import __version__
from content_gateway.api.errors import register_exception_handlers
from content_gateway.api.routers.dev_auth import router as dev_auth_router
from content_gateway.api.routers.editorial import router as editorial_router
from content_gateway.api.routers.health import router as health_router
from content_gateway.cms_client.content_http import build_http_client
from content_gateway.observability.logging import configure_logging, get_logger
from content_gateway.observability.middleware import RequestContextMiddleware
from content_gateway.settings import Settings, get_settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    cms_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, cms_api_url=settings.cms_api_url)
        # One pooled client per process; routers obtain it via `api.deps`.
        app.state.cms_http = build_http_client(
            base_url=settings.cms_api_url,
            timeout_seconds=settings.upstream_timeout_seconds,
            transport=cms_transport,
        )
        try:
            yield
        finally:
            await app.state.cms_http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Content Gateway",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    # Routers read settings through `get_settings`; pin it to the instance we were built with.
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(editorial_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; authorization
# logic stays in `editorial.policy` and `services.editorial_service`.
