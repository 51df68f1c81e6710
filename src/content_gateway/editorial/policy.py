"""
content_gateway.editorial.policy

Authorization decision engine for editorial mutations.

Responsibilities:
- Hold the static (action, role) -> rule table.
- Decide allow/deny from the principal's role and, for ownership-gated actions,
  the resource's ownership fact.

Two entry points exist, one per action category, so an ownership-gated decision
cannot be requested without an `OwnershipFact`:
- `decide_owned` for update-article / update-comment
- `decide_role_only` for create-tag / delete-tag
"""

from __future__ import annotations

import enum
from types import MappingProxyType

from content_gateway.auth.models import Principal, Role
from content_gateway.editorial.resources import OwnershipFact


class Action(enum.StrEnum):
    update_article = "update-article"
    update_comment = "update-comment"
    create_tag = "create-tag"
    delete_tag = "delete-tag"


class Decision(enum.StrEnum):
    allow = "allow"
    deny = "deny"


class Rule(enum.Enum):
    always = "always"
    never = "never"
    # Allowed only when the principal owns the resource.
    owner = "owner"


_OWNED_RULES = MappingProxyType(
    {
        Action.update_article: MappingProxyType(
            {
                Role.admin: Rule.always,
                Role.writer: Rule.owner,
                Role.reader: Rule.never,
            }
        ),
        # writer and reader share the same ownership-only gate
        Action.update_comment: MappingProxyType(
            {
                Role.admin: Rule.always,
                Role.writer: Rule.owner,
                Role.reader: Rule.owner,
            }
        ),
    }
)

_ROLE_ONLY_RULES = MappingProxyType(
    {
        Action.create_tag: MappingProxyType(
            {
                Role.admin: Rule.always,
                Role.writer: Rule.never,
                Role.reader: Rule.never,
            }
        ),
        Action.delete_tag: MappingProxyType(
            {
                Role.admin: Rule.always,
                Role.writer: Rule.never,
                Role.reader: Rule.never,
            }
        ),
    }
)


def requires_ownership(action: Action) -> bool:
    return action in _OWNED_RULES


def rule_for(action: Action, role: Role) -> Rule:
    table = _OWNED_RULES.get(action) or _ROLE_ONLY_RULES[action]
    return table[role]


def denied_by_role(principal: Principal, action: Action) -> bool:
    # True when no ownership fact could change the outcome.
    return rule_for(action, principal.role) is Rule.never


def decide_owned(principal: Principal, action: Action, fact: OwnershipFact) -> Decision:
    if action not in _OWNED_RULES:
        raise ValueError(f"{action} is not an ownership-gated action")

    rule = rule_for(action, principal.role)
    if rule is Rule.always:
        return Decision.allow
    if rule is Rule.owner and principal.subject == fact.owner_id:
        return Decision.allow
    return Decision.deny


def decide_role_only(principal: Principal, action: Action) -> Decision:
    if action not in _ROLE_ONLY_RULES:
        raise ValueError(f"{action} requires an ownership fact")

    if rule_for(action, principal.role) is Rule.always:
        return Decision.allow
    return Decision.deny


# --- Module Notes -----------------------------------------------------------
# Identifiers are compared with exact string equality (no case folding).
# Adding a role means adding one entry per action above; there is no role ranking.
