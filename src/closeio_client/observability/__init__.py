"""
closeio_client.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
