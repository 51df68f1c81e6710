"""
content_gateway.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the upstream client is open.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from content_gateway.api.deps import cms_http_from_app

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(http: httpx.AsyncClient = Depends(cms_http_from_app)) -> dict[str, str]:
    # The content store is not probed: its availability is reported per request as 502.
    if http.is_closed:
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Upstream client closed"
        )
    return {"status": "ready"}
