"""
content_gateway.cms_client.content_http

HTTP client boundary to the upstream content-management API.

Responsibilities:
- Fetch the ownership projection of articles/comments (Resource Lookup).
- Forward exactly one write per allowed mutation (Mutation Executor).
- Translate httpx failures into the gateway error taxonomy.
"""

from __future__ import annotations

from typing import Any, Literal
from urllib.parse import quote

import httpx

from content_gateway.editorial.resources import OwnershipFact, ResourceKind, ResourceRef
from content_gateway.errors import ResourceNotFound, UpstreamUnavailable

MutationMethod = Literal["PATCH", "POST", "DELETE"]

_COLLECTIONS: dict[ResourceKind, str] = {
    ResourceKind.article: "/api/articles",
    ResourceKind.comment: "/api/comments",
    ResourceKind.tag: "/api/tags",
}

# Field holding the owner identifier in each kind's upstream representation.
_OWNER_FIELDS: dict[ResourceKind, str] = {
    ResourceKind.article: "authorId",
    ResourceKind.comment: "userId",
}


def resource_path(target: ResourceRef | ResourceKind) -> str:
    if isinstance(target, ResourceKind):
        return _COLLECTIONS[target]
    return f"{_COLLECTIONS[target.kind]}/{quote(target.id, safe='')}"


class CmsClient:
    """
    One upstream call per method invocation; no retries, no caching.
    The underlying `httpx.AsyncClient` carries the base url and timeout.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def fetch_owner(self, ref: ResourceRef) -> OwnershipFact:
        field = _OWNER_FIELDS.get(ref.kind)
        if field is None:
            raise ValueError(f"{ref.kind} resources have no owner")

        body = await self._send("GET", resource_path(ref), ref=ref)
        if not isinstance(body, dict):
            raise UpstreamUnavailable(
                "Unexpected ownership projection from content service",
                details={"resource": ref.kind.value, "id": ref.id},
            )
        owner = body.get(field)
        if not isinstance(owner, str) or not owner:
            raise UpstreamUnavailable(
                "Content service did not report a resource owner",
                details={"resource": ref.kind.value, "id": ref.id, "field": field},
            )
        return OwnershipFact(owner_id=owner)

    async def apply(
        self,
        *,
        method: MutationMethod,
        target: ResourceRef | ResourceKind,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        # A bare ResourceKind addresses the collection (e.g. POST /api/tags).
        ref = target if isinstance(target, ResourceRef) else None
        return await self._send(method, resource_path(target), ref=ref, payload=payload)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        ref: ResourceRef | None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        try:
            r = await self._http.request(method, path, json=payload)
        except httpx.HTTPError as e:
            # Transport-level failures (connect errors, timeouts, protocol errors).
            raise UpstreamUnavailable(
                "Content service unreachable",
                details={"method": method, "path": path, "reason": type(e).__name__},
            ) from e

        if r.status_code == 404:
            if ref is not None:
                raise ResourceNotFound(
                    f"{ref.kind.value.capitalize()} not found",
                    details={"resource": ref.kind.value, "id": ref.id},
                )
            raise ResourceNotFound(details={"path": path})

        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailable(
                "Content service returned an error",
                details={"method": method, "path": path, "status": r.status_code},
            ) from e

        if not r.content:
            return {}
        try:
            return r.json()
        except ValueError as e:
            raise UpstreamUnavailable(
                "Content service returned a non-JSON body",
                details={"method": method, "path": path},
            ) from e


def build_http_client(
    *,
    base_url: str,
    timeout_seconds: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url.rstrip("/"), timeout=timeout_seconds, transport=transport
    )


# --- Module Notes -----------------------------------------------------------
# Retry policy, if ever needed, belongs in the httpx transport configured in
# `build_http_client`, not in the editorial flow.
