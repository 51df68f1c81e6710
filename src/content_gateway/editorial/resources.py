"""
content_gateway.editorial.resources

Value types naming upstream resources and their ownership.

Responsibilities:
- Identify a target resource without carrying its data (`ResourceRef`).
- Carry the single ownership-relevant attribute of a resource (`OwnershipFact`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ResourceKind(enum.StrEnum):
    article = "article"
    comment = "comment"
    tag = "tag"


@dataclass(frozen=True, slots=True)
class ResourceRef:
    kind: ResourceKind
    id: str


@dataclass(frozen=True, slots=True)
class OwnershipFact:
    """
    Owner identifier of a resource as reported by the content store.
    Always fetched fresh for the decision that uses it.
    """

    owner_id: str


# --- Module Notes -----------------------------------------------------------
# Tags have no owner; only articles and comments ever produce an OwnershipFact.
