"""
content_gateway.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation and access logging.
"""

# Package marker.
