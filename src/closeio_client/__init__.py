"""
closeio_client

Thin async client for the Close.io CRM REST API.

Responsibilities:
- Expose package version metadata.
- Re-export the client, its result types and per-call options.
"""

from closeio_client.clients.close_http import CloseIoClient
from closeio_client.errors import CloseIoError, PayloadEncodingError, UnhandledResponseError
from closeio_client.observability.logging import configure_logging
from closeio_client.pipeline.body import JsonBody, TextBody
from closeio_client.pipeline.options import RequestOptions
from closeio_client.pipeline.results import Failure, Result, Success, is_success
from closeio_client.settings import Settings, get_settings

__all__ = [
    "CloseIoClient",
    "CloseIoError",
    "Failure",
    "JsonBody",
    "PayloadEncodingError",
    "RequestOptions",
    "Result",
    "Settings",
    "Success",
    "TextBody",
    "UnhandledResponseError",
    "__version__",
    "configure_logging",
    "get_settings",
    "is_success",
]

__version__ = "0.1.0"
