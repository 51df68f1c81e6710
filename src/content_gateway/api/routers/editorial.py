"""
content_gateway.api.routers.editorial

Editorial mutation endpoints (articles, comments, tags).

Responsibilities:
- Validate request payload shape.
- Delegate authorization + upstream forwarding to `EditorialService`.
- Wrap upstream responses in the success envelope.
"""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import HTTP_201_CREATED

from content_gateway.api.deps import editorial_service
from content_gateway.api.envelope import Envelope, wrap
from content_gateway.auth.deps import get_principal
from content_gateway.auth.models import Principal
from content_gateway.services.editorial_service import EditorialService

router = APIRouter(tags=["editorial"])

ArticleStatus = Literal["draft", "published", "archived"]


class UpdateArticleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    # Upstream ids are Mongo ObjectIds.
    author_id: str | None = Field(default=None, alias="authorId", pattern=r"^[0-9a-fA-F]{24}$")
    slug: str | None = Field(default=None, min_length=1, max_length=30)
    perex: str | None = Field(default=None, min_length=1, max_length=200)
    status: ArticleStatus | None = None
    tags: list[str] | None = None


class UpdateCommentRequest(BaseModel):
    content: str | None = Field(default=None, min_length=1, max_length=1000)
    status: str | None = Field(default=None, max_length=50)


class CreateTagRequest(BaseModel):
    name: str = Field(min_length=1, max_length=30)
    description: str | None = Field(default=None, max_length=200)


def _forwarded(body: BaseModel) -> dict[str, Any]:
    # Forward only what the client actually sent, using upstream field names.
    return body.model_dump(exclude_unset=True, by_alias=True)


@router.patch("/articles/{article_id}")
async def update_article(
    article_id: str,
    body: UpdateArticleRequest,
    principal: Principal = Depends(get_principal),
    svc: EditorialService = Depends(editorial_service),
) -> Envelope[Any]:
    return wrap(await svc.update_article(article_id, _forwarded(body), principal))


@router.patch("/comments/{comment_id}")
async def update_comment(
    comment_id: str,
    body: UpdateCommentRequest,
    principal: Principal = Depends(get_principal),
    svc: EditorialService = Depends(editorial_service),
) -> Envelope[Any]:
    return wrap(await svc.update_comment(comment_id, _forwarded(body), principal))


@router.post("/tags", status_code=HTTP_201_CREATED)
async def create_tag(
    body: CreateTagRequest,
    principal: Principal = Depends(get_principal),
    svc: EditorialService = Depends(editorial_service),
) -> Envelope[Any]:
    return wrap(await svc.create_tag(_forwarded(body), principal))


@router.delete("/tags/{tag_id}")
async def delete_tag(
    tag_id: str,
    principal: Principal = Depends(get_principal),
    svc: EditorialService = Depends(editorial_service),
) -> Envelope[Any]:
    return wrap(await svc.delete_tag(tag_id, principal))


# --- Module Notes -----------------------------------------------------------
# No role checks happen at the router level; every rule lives in `editorial.policy`
# so ownership-gated and role-only actions share one table.
