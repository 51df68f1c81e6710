"""
tests.conftest

Shared fixtures: settings, a recording fake of the content store, and an in-process
API client.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from content_gateway.api.app import create_app
from content_gateway.auth.jwt import JwtConfig, issue_token
from content_gateway.settings import Settings


class FakeCms:
    """
    In-memory stand-in for the content API, served through `httpx.MockTransport`.
    Every request is recorded as (method, path, json_body).
    """

    def __init__(self) -> None:
        self.articles: dict[str, str] = {}  # id -> authorId
        self.comments: dict[str, str] = {}  # id -> userId
        self.calls: list[tuple[str, str, Any]] = []
        self.raise_exc: Exception | None = None
        self.status_overrides: dict[tuple[str, str], int] = {}
        self.transport = httpx.MockTransport(self._handle)

    def methods(self) -> list[str]:
        return [m for m, _, _ in self.calls]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        path = request.url.path
        self.calls.append((request.method, path, body))

        if self.raise_exc is not None:
            raise self.raise_exc
        override = self.status_overrides.get((request.method, path))
        if override is not None:
            return httpx.Response(override, json={"message": "upstream says no"})

        parts = path.strip("/").split("/")  # ["api", collection, id?]
        collection = parts[1] if len(parts) > 1 else ""
        item_id = parts[2] if len(parts) > 2 else None

        if request.method == "GET":
            store, field = {
                "articles": (self.articles, "authorId"),
                "comments": (self.comments, "userId"),
            }[collection]
            if item_id not in store:
                return httpx.Response(404, json={"message": "not found"})
            return httpx.Response(200, json={"id": item_id, field: store[item_id]})
        if request.method == "PATCH":
            return httpx.Response(200, json={"id": item_id, **(body or {})})
        if request.method == "POST":
            return httpx.Response(201, json={"id": "tag-1", **(body or {})})
        if request.method == "DELETE":
            return httpx.Response(200, json={"success": True})
        return httpx.Response(405)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        jwt_secret="test-secret",
        cms_api_url="http://cms.local",
        log_level="WARNING",
    )


@pytest.fixture
def cms() -> FakeCms:
    return FakeCms()


@pytest.fixture
def token_for(settings: Settings):
    cfg = JwtConfig.from_settings(settings)

    def _mint(subject: str, role: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {issue_token(cfg=cfg, subject=subject, role=role)}"}

    return _mint


@pytest_asyncio.fixture
async def api(settings: Settings, cms: FakeCms) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, cms_transport=cms.transport)

    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
