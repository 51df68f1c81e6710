"""
content_gateway.api

API package for the Content Gateway service.

Responsibilities:
- FastAPI app factory and router modules.
- Response envelope and exception handlers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + auth + delegation to services.
