"""
tests.test_pipeline

Unit tests for the request pipeline building blocks.

Responsibilities:
- Option merge precedence.
- Body encoding/decoding.
- Rule-ordered status classification.
- URL and header helpers.
"""

from __future__ import annotations

import json

import httpx
import pytest

from closeio_client.errors import PayloadEncodingError, UnhandledResponseError
from closeio_client.pipeline.body import JsonBody, TextBody, decode_body, encode_json
from closeio_client.pipeline.options import RequestOptions, merge_options, with_params
from closeio_client.pipeline.results import (
    RESPONSE_RULES,
    Failure,
    Success,
    classify_response,
    is_success,
    transport_failure,
)
from closeio_client.pipeline.transport import build_url, normalize_headers, object_path


def test_merge_without_overrides_returns_defaults() -> None:
    defaults = RequestOptions(auth=("key", ""), headers={"Content-Type": "application/json"})

    assert merge_options(defaults, None) is defaults


def test_merge_caller_wins_on_conflicts_and_none_falls_back() -> None:
    defaults = RequestOptions(
        auth=("key", ""),
        headers={"Content-Type": "application/json", "X-Trace": "a"},
        params={"_limit": "50"},
        timeout=30.0,
    )
    overrides = RequestOptions(headers={"X-Trace": "b"}, params={"_limit": "10", "_skip": "10"})

    merged = merge_options(defaults, overrides)

    assert merged.auth == ("key", "")
    assert merged.timeout == 30.0
    assert merged.headers == {"Content-Type": "application/json", "X-Trace": "b"}
    assert merged.params == {"_limit": "10", "_skip": "10"}


def test_merge_headers_ignore_name_case() -> None:
    defaults = RequestOptions(headers={"Content-Type": "application/json"})
    overrides = RequestOptions(headers={"content-type": "application/vnd.close+json"})

    merged = merge_options(defaults, overrides)

    assert httpx.Headers(merged.headers).get_list("Content-Type") == [
        "application/vnd.close+json"
    ]


def test_with_params_replaces_caller_value() -> None:
    opts = with_params(RequestOptions(params={"query": "old", "_limit": "5"}), query="new")

    assert opts.params == {"query": "new", "_limit": "5"}
    assert with_params(None, query="acme").params == {"query": "acme"}


def test_encode_json_is_stable_for_nested_payloads() -> None:
    payload = {"a": [1, 2.5, None, True], "b": {"c": "d", "e": []}, "f": "ünïcode"}

    encoded = encode_json(payload)

    assert encoded == json.dumps(json.loads(encoded)).encode("utf-8")
    assert json.loads(encoded) == payload


@pytest.mark.parametrize("payload", [{"x": object()}, {"x": float("nan")}, {1j: "complex"}])
def test_encode_json_rejects_unserialisable(payload: object) -> None:
    with pytest.raises(PayloadEncodingError):
        encode_json(payload)


def test_payload_encoding_error_is_a_type_error() -> None:
    assert issubclass(PayloadEncodingError, TypeError)


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        (b'{"id": "lead_123"}', JsonBody({"id": "lead_123"})),
        (b"[1, 2]", JsonBody([1, 2])),
        (b"42", JsonBody(42)),
        (b"<html>oops</html>", TextBody("<html>oops</html>")),
        (b"", TextBody("")),
    ],
)
def test_decode_body(content: bytes, expected: object) -> None:
    assert decode_body(httpx.Response(200, content=content)) == expected


def test_decode_body_tolerates_invalid_utf8() -> None:
    assert isinstance(decode_body(httpx.Response(200, content=b"caf\xe9 au lait")), TextBody)


def test_decode_body_survives_runaway_nesting() -> None:
    content = b"[" * 200_000

    assert decode_body(httpx.Response(200, content=content)) == TextBody("[" * 200_000)


def test_decode_body_text_honours_charset() -> None:
    response = httpx.Response(
        200,
        content="na\u00efve".encode("latin-1"),
        headers={"Content-Type": "text/plain; charset=latin-1"},
    )

    assert decode_body(response) == TextBody("na\u00efve")


def test_rules_are_ordered() -> None:
    assert [r.name for r in RESPONSE_RULES] == ["not_found", "field_errors", "ok"]


def test_classify_not_found() -> None:
    assert classify_response(404, JsonBody({"error": "not found"})) == Failure("not found")


def test_classify_field_errors_keeps_whole_body() -> None:
    body = {"errors": ["bad"], "field-errors": {"name": "required"}, "extra": 1}

    assert classify_response(400, JsonBody(body)) == Failure(body)


def test_classify_success() -> None:
    result = classify_response(200, JsonBody({"id": "lead_123"}))

    assert is_success(result)
    assert result.value == {"id": "lead_123"}


@pytest.mark.parametrize(
    ("status", "body"),
    [
        (404, JsonBody({"detail": "missing"})),
        (404, TextBody("Not Found")),
        (400, JsonBody({"errors": ["bad"]})),
        (400, JsonBody(["errors", "field-errors"])),
        (201, JsonBody({"id": "lead_123"})),
        (500, TextBody("Internal Server Error")),
    ],
)
def test_classify_unmatched_raises(status: int, body: object) -> None:
    with pytest.raises(UnhandledResponseError) as excinfo:
        classify_response(status, body)  # type: ignore[arg-type]

    assert excinfo.value.status_code == status
    assert "unhandled" in str(excinfo.value)


def test_transport_failure_wraps_error() -> None:
    error = httpx.ConnectError("dns failure")

    assert transport_failure(error) == Failure(error)
    assert not is_success(transport_failure(error))


@pytest.mark.parametrize(
    "base_url",
    ["https://app.close.io/api/v1", "https://app.close.io/api/v1/"],
)
def test_build_url_has_no_double_slash(base_url: str) -> None:
    assert build_url(base_url, "/lead/lead_1/") == "https://app.close.io/api/v1/lead/lead_1/"


def test_object_path_keeps_trailing_slash() -> None:
    assert object_path("lead") == "/lead/"
    assert object_path("custom_fields/lead", "cf_1") == "/custom_fields/lead/cf_1/"


def test_normalize_headers_adds_accept_when_missing() -> None:
    headers = normalize_headers({"Content-Type": "application/json"})

    assert headers["accept"] == "application/json"
    assert headers["content-type"] == "application/json"


def test_normalize_headers_keeps_existing_accept_any_case() -> None:
    headers = normalize_headers({"accept": "text/csv"})

    assert headers.get_list("Accept") == ["text/csv"]


def test_success_value_for_text_body() -> None:
    assert Success(TextBody("ok")).value == "ok"


# --- Module Notes -----------------------------------------------------------
# Client-level behaviour (dispatch, auth, logging) is covered in `test_client.py`.
