"""
content_gateway.services

Service-layer package.

Responsibilities:
- Compose lookup -> decision -> mutation for each editorial action.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake upstream transports.
