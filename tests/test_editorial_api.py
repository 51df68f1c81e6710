"""
tests.test_editorial_api

End-to-end editorial endpoint tests against an in-process app and a fake content store.
"""

from __future__ import annotations

import httpx
import pytest

from content_gateway.api.app import create_app


@pytest.mark.asyncio
async def test_admin_update_article_is_wrapped(api: httpx.AsyncClient, cms, token_for) -> None:
    cms.articles["article-123"] = "someone-else"

    r = await api.patch(
        "/articles/article-123",
        json={"title": "Updated"},
        headers=token_for("admin-1", "admin"),
    )

    assert r.status_code == 200
    assert r.json() == {"data": {"id": "article-123", "title": "Updated"}}
    assert cms.calls[-1] == ("PATCH", "/api/articles/article-123", {"title": "Updated"})


@pytest.mark.asyncio
async def test_only_sent_fields_are_forwarded(api: httpx.AsyncClient, cms, token_for) -> None:
    cms.articles["a1"] = "writer-1"

    r = await api.patch(
        "/articles/a1",
        json={"authorId": "507f1f77bcf86cd799439011", "tags": ["rpg"]},
        headers=token_for("writer-1", "writer"),
    )

    assert r.status_code == 200
    assert cms.calls[-1][2] == {"authorId": "507f1f77bcf86cd799439011", "tags": ["rpg"]}


@pytest.mark.asyncio
async def test_writer_foreign_article_is_forbidden(
    api: httpx.AsyncClient, cms, token_for
) -> None:
    cms.articles["article-foreign"] = "writer-other"

    r = await api.patch(
        "/articles/article-foreign",
        json={"title": "New"},
        headers=token_for("writer-123", "writer"),
    )

    assert r.status_code == 403
    assert r.json()["error"]["code"] == "FORBIDDEN"
    assert r.json()["error"]["statusCode"] == 403
    assert cms.methods() == ["GET"]


@pytest.mark.asyncio
async def test_reader_updates_own_comment(api: httpx.AsyncClient, cms, token_for) -> None:
    cms.comments["comment-1"] = "reader-123"

    r = await api.patch(
        "/comments/comment-1",
        json={"content": "Updated"},
        headers=token_for("reader-123", "reader"),
    )

    assert r.status_code == 200
    assert r.json() == {"data": {"id": "comment-1", "content": "Updated"}}


@pytest.mark.asyncio
async def test_missing_article_is_404(api: httpx.AsyncClient, cms, token_for) -> None:
    r = await api.patch(
        "/articles/nope", json={"title": "x"}, headers=token_for("writer-1", "writer")
    )

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"
    assert cms.methods() == ["GET"]


@pytest.mark.asyncio
async def test_reader_article_update_is_403_without_lookup(
    api: httpx.AsyncClient, cms, token_for
) -> None:
    r = await api.patch(
        "/articles/nope", json={"title": "x"}, headers=token_for("reader-1", "reader")
    )

    assert r.status_code == 403
    assert r.json()["error"]["code"] == "FORBIDDEN"
    assert cms.calls == []


@pytest.mark.asyncio
async def test_upstream_down_is_502(api: httpx.AsyncClient, cms, token_for) -> None:
    cms.raise_exc = httpx.ConnectTimeout("timed out")

    r = await api.patch(
        "/comments/c1", json={"content": "x"}, headers=token_for("reader-1", "reader")
    )

    assert r.status_code == 502
    assert r.json()["error"]["code"] == "UPSTREAM_UNAVAILABLE"


@pytest.mark.asyncio
async def test_tags_admin_only(api: httpx.AsyncClient, cms, token_for) -> None:
    r = await api.post("/tags", json={"name": "NewTag"}, headers=token_for("writer", "writer"))
    assert r.status_code == 403
    r = await api.delete("/tags/tag-123", headers=token_for("reader", "reader"))
    assert r.status_code == 403
    assert cms.calls == []

    r = await api.post("/tags", json={"name": "RPG"}, headers=token_for("admin", "admin"))
    assert r.status_code == 201
    assert r.json() == {"data": {"id": "tag-1", "name": "RPG"}}

    r = await api.delete("/tags/tag-1", headers=token_for("admin", "admin"))
    assert r.status_code == 200
    assert r.json() == {"data": {"success": True}}


@pytest.mark.asyncio
async def test_missing_token_is_401(api: httpx.AsyncClient, cms) -> None:
    r = await api.patch("/articles/a1", json={"title": "x"})

    assert r.status_code == 401
    assert r.json()["error"]["code"] == "AUTHENTICATION_ERROR"
    assert cms.calls == []


@pytest.mark.asyncio
async def test_unknown_role_is_401(api: httpx.AsyncClient, cms, token_for) -> None:
    r = await api.post("/tags", json={"name": "x"}, headers=token_for("u1", "superuser"))

    assert r.status_code == 401
    assert cms.calls == []


@pytest.mark.asyncio
async def test_garbage_token_is_401(api: httpx.AsyncClient) -> None:
    r = await api.delete("/tags/t1", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "body"),
    [
        ("/articles/a1", {"status": "pending"}),
        ("/articles/a1", {"authorId": "not-a-mongo-id"}),
        ("/articles/a1", {"tags": "single-tag"}),
        ("/articles/a1", {"title": ""}),
        ("/comments/c1", {"content": ""}),
        ("/comments/c1", {"status": "x" * 51}),
    ],
)
async def test_invalid_payloads_are_422(
    api: httpx.AsyncClient, cms, token_for, path: str, body: dict
) -> None:
    r = await api.patch(path, json=body, headers=token_for("admin", "admin"))

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
    assert cms.calls == []


@pytest.mark.asyncio
async def test_create_tag_requires_name(api: httpx.AsyncClient, cms, token_for) -> None:
    r = await api.post("/tags", json={"description": "d"}, headers=token_for("admin", "admin"))
    assert r.status_code == 422
    assert cms.calls == []


@pytest.mark.asyncio
async def test_upstream_data_key_is_wrapped_once_more(settings, token_for) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json={"id": "a1", "authorId": "admin"})
        return httpx.Response(200, json={"data": 1})

    app = create_app(settings=settings, cms_transport=httpx.MockTransport(handler))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.patch("/articles/a1", json={}, headers=token_for("admin", "admin"))

    assert r.status_code == 200
    assert r.json() == {"data": {"data": 1}}
