"""
content_gateway.api.routers

HTTP routers (health, dev auth, editorial mutations).
"""

# Package marker.
