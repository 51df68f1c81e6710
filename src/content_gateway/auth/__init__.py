"""
content_gateway.auth

Authentication package.

Responsibilities:
- JWT helpers and validation.
- FastAPI auth dependency (bearer token -> Principal).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Authorization decisions live in `content_gateway.editorial.policy`, not here.
