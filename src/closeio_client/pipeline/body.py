"""
closeio_client.pipeline.body

Request body encoding and best-effort response body decoding.

Responsibilities:
- Encode outgoing payloads as UTF-8 JSON, failing fast on unserialisable values.
- Decode response bodies into an explicit JSON-or-text variant.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx

from closeio_client.errors import PayloadEncodingError


@dataclass(frozen=True, slots=True)
class JsonBody:
    value: Any


@dataclass(frozen=True, slots=True)
class TextBody:
    text: str


ResponseBody = JsonBody | TextBody


def encode_json(payload: Any) -> bytes:
    try:
        # NaN/Infinity are not JSON; refuse them instead of sending invalid text.
        text = json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise PayloadEncodingError(f"payload is not JSON-serialisable: {e}") from e
    return text.encode("utf-8")


def decode_body(response: httpx.Response) -> ResponseBody:
    """
    JSON when the body parses, otherwise the response text (decoded with its charset).
    Never raises.
    """

    try:
        return JsonBody(json.loads(response.content))
    except (ValueError, RecursionError):
        # ValueError covers bad JSON and bad UTF-8; RecursionError covers runaway nesting.
        return TextBody(response.text)


# --- Module Notes -----------------------------------------------------------
# An empty body is not valid JSON and decodes to `TextBody("")`.
