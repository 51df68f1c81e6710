"""
content_gateway.cms_client

Upstream content store client package.

Responsibilities:
- Provide the HTTP boundary to the content-management API (ownership lookups + mutations).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should depend on this boundary (not on httpx or URLs directly).
