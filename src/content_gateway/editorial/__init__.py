"""
content_gateway.editorial

Editorial authorization domain.

Responsibilities:
- Resource references and ownership facts (`resources`).
- The authorization decision engine (`policy`).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package performs I/O; the upstream lookups live in `cms_client`.
