"""
closeio_client.pipeline.transport

httpx client construction and request shaping helpers.

Responsibilities:
- Build the shared `httpx.AsyncClient` (timeouts; pooling is httpx's concern).
- Build request URLs from the base url and an operation path.
- Normalise request headers (default `Accept: application/json`).
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from closeio_client.settings import Settings

JSON_MEDIA_TYPE = "application/json"


def build_async_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.timeout_seconds))


def build_url(base_url: str, path: str) -> str:
    # Plain concatenation: ids are interpolated unescaped, callers pass URL-safe ids.
    return base_url.rstrip("/") + path


def object_path(object_type: str, object_id: str | None = None) -> str:
    if object_id is None:
        return f"/{object_type}/"
    return f"/{object_type}/{object_id}/"


def normalize_headers(headers: Mapping[str, str]) -> httpx.Headers:
    normalized = httpx.Headers(headers)
    if "accept" not in normalized:
        normalized["Accept"] = JSON_MEDIA_TYPE
    return normalized


# --- Module Notes -----------------------------------------------------------
# `httpx.Headers` is case-insensitive, so a caller's `accept: text/csv` is kept as-is.
