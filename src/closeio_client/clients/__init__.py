"""
closeio_client.clients

Remote API client package.

Responsibilities:
- Provide the Close.io REST client (`close_http.CloseIoClient`).
"""

# Package marker.
