"""
content_gateway.services.editorial_service

Editorial mutation service.

Responsibilities:
- Resolve ownership for ownership-gated actions (fresh lookup per request).
- Ask the policy engine for a decision and raise `Denied` on deny.
- Forward allowed mutations to the content store and return its response body.
"""

from __future__ import annotations

from typing import Any, NoReturn

from content_gateway.auth.models import Principal
from content_gateway.cms_client.content_http import CmsClient, MutationMethod
from content_gateway.editorial.policy import (
    Action,
    Decision,
    decide_owned,
    decide_role_only,
    denied_by_role,
)
from content_gateway.editorial.resources import ResourceKind, ResourceRef
from content_gateway.errors import Denied
from content_gateway.observability.logging import get_logger

log = get_logger(__name__)


class EditorialService:
    def __init__(self, *, cms: CmsClient) -> None:
        self._cms = cms

    async def update_article(
        self, article_id: str, payload: dict[str, Any], principal: Principal
    ) -> Any:
        return await self._owned_mutation(
            action=Action.update_article,
            ref=ResourceRef(kind=ResourceKind.article, id=article_id),
            payload=payload,
            principal=principal,
            message="Insufficient permissions to update article",
        )

    async def update_comment(
        self, comment_id: str, payload: dict[str, Any], principal: Principal
    ) -> Any:
        return await self._owned_mutation(
            action=Action.update_comment,
            ref=ResourceRef(kind=ResourceKind.comment, id=comment_id),
            payload=payload,
            principal=principal,
            message="Insufficient permissions to update comment",
        )

    async def create_tag(self, payload: dict[str, Any], principal: Principal) -> Any:
        self._authorize_role_only(
            Action.create_tag, principal, message="Admin role required to create tags"
        )
        return await self._apply(
            action=Action.create_tag,
            method="POST",
            target=ResourceKind.tag,
            payload=payload,
            principal=principal,
        )

    async def delete_tag(self, tag_id: str, principal: Principal) -> Any:
        self._authorize_role_only(
            Action.delete_tag, principal, message="Admin role required to delete tags"
        )
        return await self._apply(
            action=Action.delete_tag,
            method="DELETE",
            target=ResourceRef(kind=ResourceKind.tag, id=tag_id),
            payload=None,
            principal=principal,
        )

    async def _owned_mutation(
        self,
        *,
        action: Action,
        ref: ResourceRef,
        payload: dict[str, Any],
        principal: Principal,
        message: str,
    ) -> Any:
        # Roles that can never pass are rejected without revealing whether the resource exists.
        if denied_by_role(principal, action):
            self._deny(action, principal, message=message, resource_id=ref.id)

        # Lookup errors (ResourceNotFound / UpstreamUnavailable) propagate before any decision.
        fact = await self._cms.fetch_owner(ref)
        if decide_owned(principal, action, fact) is Decision.deny:
            self._deny(action, principal, message=message, resource_id=ref.id)
        return await self._apply(
            action=action, method="PATCH", target=ref, payload=payload, principal=principal
        )

    def _authorize_role_only(self, action: Action, principal: Principal, *, message: str) -> None:
        if decide_role_only(principal, action) is Decision.deny:
            self._deny(action, principal, message=message)

    def _deny(
        self,
        action: Action,
        principal: Principal,
        *,
        message: str,
        resource_id: str | None = None,
    ) -> NoReturn:
        log.info(
            "editorial.denied",
            action=action.value,
            subject=principal.subject,
            role=principal.role.value,
            resource_id=resource_id,
        )
        raise Denied(message, details={"action": action.value})

    async def _apply(
        self,
        *,
        action: Action,
        method: MutationMethod,
        target: ResourceRef | ResourceKind,
        payload: dict[str, Any] | None,
        principal: Principal,
    ) -> Any:
        result = await self._cms.apply(method=method, target=target, payload=payload)
        log.info("editorial.applied", action=action.value, subject=principal.subject)
        return result


# --- Module Notes -----------------------------------------------------------
# Role-only actions (tags) never trigger an ownership lookup: a deny is decided
# from the role alone, before any upstream call.
