"""
closeio_client.pipeline.results

Two-case call result and the status-code mapping rules.

Responsibilities:
- Define `Success` / `Failure` and the `Result` union returned by every operation.
- Map (status code, decoded body) to a result through an ordered rule list.
- Turn transport failures (connect, DNS, timeout) into `Failure` values.

Rule order (first match wins):
1. 404 with a JSON object carrying `error`            -> Failure(body["error"])
2. 400 with a JSON object carrying `errors` and
   `field-errors`                                      -> Failure(body)
3. 200                                                 -> Success(body)
Anything else raises `UnhandledResponseError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeGuard

import httpx

from closeio_client.errors import UnhandledResponseError
from closeio_client.pipeline.body import JsonBody, ResponseBody


@dataclass(frozen=True, slots=True)
class Success:
    body: ResponseBody

    @property
    def value(self) -> Any:
        # Decoded JSON, or the raw text when the body was not JSON.
        if isinstance(self.body, JsonBody):
            return self.body.value
        return self.body.text


@dataclass(frozen=True, slots=True)
class Failure:
    # Remote error value, full field-error payload, or an `httpx.TransportError`.
    reason: Any


Result = Success | Failure


def is_success(result: Result) -> TypeGuard[Success]:
    return isinstance(result, Success)


@dataclass(frozen=True, slots=True)
class ResponseRule:
    name: str
    matches: Callable[[int, ResponseBody], bool]
    build: Callable[[ResponseBody], Result]


def _json_object(body: ResponseBody) -> dict[str, Any] | None:
    if isinstance(body, JsonBody) and isinstance(body.value, dict):
        return body.value
    return None


def _has_keys(body: ResponseBody, *keys: str) -> bool:
    obj = _json_object(body)
    return obj is not None and all(k in obj for k in keys)


RESPONSE_RULES: tuple[ResponseRule, ...] = (
    ResponseRule(
        name="not_found",
        matches=lambda status, body: status == 404 and _has_keys(body, "error"),
        build=lambda body: Failure(body.value["error"]),  # type: ignore[union-attr]
    ),
    ResponseRule(
        name="field_errors",
        matches=lambda status, body: status == 400 and _has_keys(body, "errors", "field-errors"),
        build=lambda body: Failure(body.value),  # type: ignore[union-attr]
    ),
    ResponseRule(
        name="ok",
        matches=lambda status, body: status == 200,
        build=Success,
    ),
)


def classify_response(
    status_code: int,
    body: ResponseBody,
    *,
    rules: tuple[ResponseRule, ...] = RESPONSE_RULES,
) -> Result:
    for rule in rules:
        if rule.matches(status_code, body):
            return rule.build(body)
    # No catch-all: unrecognised responses are surfaced, not folded into Failure.
    raise UnhandledResponseError(status_code=status_code, body=body)


def transport_failure(exc: httpx.TransportError) -> Failure:
    return Failure(exc)


# --- Module Notes -----------------------------------------------------------
# `TextBody` never satisfies the 404/400 rules; a 200 with a text body is still Success.
