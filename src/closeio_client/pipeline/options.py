"""
closeio_client.pipeline.options

Per-call request options and their merge rules.

Responsibilities:
- Name the call-scoped overrides a caller may pass (`opts`).
- Merge caller options over the client's defaults with a documented precedence.

Precedence:
- Scalar fields (`auth`, `timeout`): the caller's value wins unless it is None,
  in which case the default applies.
- Mapping fields (`headers`, `params`): merged key by key, caller keys win;
  header names compare case-insensitively.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

import httpx


@dataclass(frozen=True, slots=True)
class RequestOptions:
    auth: tuple[str, str] | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)
    timeout: float | None = None


def merge_options(defaults: RequestOptions, overrides: RequestOptions | None) -> RequestOptions:
    if overrides is None:
        return defaults
    return RequestOptions(
        auth=overrides.auth if overrides.auth is not None else defaults.auth,
        headers=_merge_headers(defaults.headers, overrides.headers),
        params={**defaults.params, **overrides.params},
        timeout=overrides.timeout if overrides.timeout is not None else defaults.timeout,
    )


def _merge_headers(
    defaults: Mapping[str, str], overrides: Mapping[str, str]
) -> httpx.Headers:
    # Header names are case-insensitive: a caller `content-type` replaces `Content-Type`.
    merged = httpx.Headers(defaults)
    merged.update(overrides)
    return merged


def with_params(opts: RequestOptions | None, **params: str) -> RequestOptions:
    """
    Force operation-owned query params; they replace caller params of the same name.
    """

    base = opts or RequestOptions()
    return replace(base, params={**base.params, **params})


# --- Module Notes -----------------------------------------------------------
# `find_leads` uses `with_params` so `query` always carries the search term.
