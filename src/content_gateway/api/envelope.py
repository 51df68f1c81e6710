"""
content_gateway.api.envelope

Success response envelope.

Responsibilities:
- Define the tagged `{"data": ...}` envelope returned by every editorial endpoint.
- Provide an idempotent constructor (`wrap`) and a recognizer (`is_envelope`).
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    data: T


def is_envelope(value: Any) -> bool:
    # Recognized by type only; an upstream dict shaped like {"data": ...} is just data.
    return isinstance(value, Envelope)


def wrap(value: Any) -> Envelope[Any]:
    if is_envelope(value):
        return value
    return Envelope(data=value)


# --- Module Notes -----------------------------------------------------------
# Error responses use the sibling `{"error": {...}}` shape from `api.errors`.
