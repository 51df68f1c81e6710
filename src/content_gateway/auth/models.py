"""
content_gateway.auth.models

Auth domain models.

Responsibilities:
- Define the closed role set (`Role`).
- Define the authenticated identity type (`Principal`) injected into endpoints.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Role(enum.StrEnum):
    # Closed set; the authorization rule table is keyed on these values.
    reader = "reader"
    writer = "writer"
    admin = "admin"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity with its single assigned role.
    """

    subject: str
    role: Role


# --- Module Notes -----------------------------------------------------------
# A Principal is built once per request from a verified token and never persisted.
