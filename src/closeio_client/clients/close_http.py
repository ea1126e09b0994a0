"""
closeio_client.clients.close_http

Async HTTP client for the Close.io REST API.

Responsibilities:
- Expose one coroutine per remote operation (leads, opportunities, custom fields,
  organizations, statuses, email activities, users).
- Run every call through one pipeline: build URL -> resolve credentials -> merge
  options -> normalise headers -> encode body -> dispatch -> decode -> classify.
- Return `Success` / `Failure` values; only encoding bugs and unrecognised
  responses raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from closeio_client.auth.credentials import (
    CredentialProvider,
    basic_auth_for,
    credentials_from_settings,
)
from closeio_client.errors import UnhandledResponseError
from closeio_client.observability.logging import get_logger
from closeio_client.pipeline.body import decode_body, encode_json
from closeio_client.pipeline.options import RequestOptions, merge_options, with_params
from closeio_client.pipeline.results import Result, classify_response, transport_failure
from closeio_client.pipeline.transport import (
    JSON_MEDIA_TYPE,
    build_async_client,
    build_url,
    normalize_headers,
    object_path,
)
from closeio_client.settings import Settings

log = get_logger(__name__)

_JSON_CONTENT = {"Content-Type": JSON_MEDIA_TYPE}


class CloseIoClient:
    """
    Stateless apart from configuration: safe to share across concurrent tasks.

    Pass `http` to reuse an existing `httpx.AsyncClient` (its lifecycle stays with the
    caller); otherwise one is built from settings and closed by `aclose()`.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient | None = None,
        credentials: CredentialProvider | None = None,
    ) -> None:
        self._settings = settings
        self._owns_http = http is None
        self._http = http if http is not None else build_async_client(settings)
        self._credentials = credentials or credentials_from_settings(settings)

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> CloseIoClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # Leads

    async def find_leads(self, search_term: str, *, opts: RequestOptions | None = None) -> Result:
        # Single page only; the API's `_skip`/`_limit` can be passed through `opts.params`.
        opts = with_params(opts, query=search_term)
        return await self.request("GET", object_path("lead"), opts=opts)

    async def get_lead(self, lead_id: str, *, opts: RequestOptions | None = None) -> Result:
        return await self.fetch_object("lead", lead_id, opts=opts)

    async def create_lead(
        self, payload: Mapping[str, Any], *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.create_object("lead", payload, opts=opts)

    async def update_lead(
        self, lead_id: str, payload: Mapping[str, Any], *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.update_object("lead", lead_id, payload, opts=opts)

    # Opportunities

    async def get_opportunity(
        self, opportunity_id: str, *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.fetch_object("opportunity", opportunity_id, opts=opts)

    async def create_opportunity(
        self, payload: Mapping[str, Any], *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.create_object("opportunity", payload, opts=opts)

    async def update_opportunity(
        self,
        opportunity_id: str,
        payload: Mapping[str, Any],
        *,
        opts: RequestOptions | None = None,
    ) -> Result:
        return await self.update_object("opportunity", opportunity_id, payload, opts=opts)

    # Lead custom fields

    async def get_lead_custom_field(
        self, custom_field_id: str, *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.fetch_object("custom_fields/lead", custom_field_id, opts=opts)

    # Organizations (American spelling, as the API uses it)

    async def get_organization(
        self, organization_id: str, *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.fetch_object("organization", organization_id, opts=opts)

    # Statuses

    async def get_lead_statuses(self, *, opts: RequestOptions | None = None) -> Result:
        return await self.fetch_object("status", "lead", opts=opts)

    async def get_opportunity_statuses(self, *, opts: RequestOptions | None = None) -> Result:
        return await self.fetch_object("status", "opportunity", opts=opts)

    # Email activities

    async def send_email(
        self, payload: Mapping[str, Any], *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.create_object("activity/email", payload, opts=opts)

    # Users

    async def get_users(self, *, opts: RequestOptions | None = None) -> Result:
        # TODO: page through `_skip`/`_limit` once an organization outgrows one page.
        return await self.request("GET", object_path("user"), opts=opts)

    # Shared object helpers

    async def fetch_object(
        self, object_type: str, object_id: str, *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.request("GET", object_path(object_type, object_id), opts=opts)

    async def create_object(
        self, object_type: str, payload: Mapping[str, Any], *, opts: RequestOptions | None = None
    ) -> Result:
        return await self.request(
            "POST", object_path(object_type), payload=payload, headers=_JSON_CONTENT, opts=opts
        )

    async def update_object(
        self,
        object_type: str,
        object_id: str,
        payload: Mapping[str, Any],
        *,
        opts: RequestOptions | None = None,
    ) -> Result:
        return await self.request(
            "PUT",
            object_path(object_type, object_id),
            payload=payload,
            headers=_JSON_CONTENT,
            opts=opts,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        payload: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        opts: RequestOptions | None = None,
    ) -> Result:
        url = build_url(self._settings.base_url, path)

        # Credentials resolve on every call; nothing is cached between calls.
        defaults = RequestOptions(auth=basic_auth_for(self._credentials), headers=headers or {})
        effective = merge_options(defaults, opts)

        # Encode before any I/O: an unserialisable payload raises here, nothing is sent.
        content = encode_json(payload) if payload is not None else None

        log.debug("closeio.request", method=method, path=path)
        try:
            response = await self._http.request(
                method,
                url,
                content=content,
                params=dict(effective.params) or None,
                headers=normalize_headers(effective.headers),
                auth=effective.auth,
                timeout=(
                    effective.timeout
                    if effective.timeout is not None
                    else httpx.USE_CLIENT_DEFAULT
                ),
            )
        except httpx.TransportError as e:
            log.warning(
                "closeio.transport_error", method=method, path=path, error=type(e).__name__
            )
            return transport_failure(e)

        log.debug("closeio.response", method=method, path=path, status=response.status_code)
        body = decode_body(response)
        try:
            return classify_response(response.status_code, body)
        except UnhandledResponseError:
            log.error(
                "closeio.unhandled_response",
                method=method,
                path=path,
                status=response.status_code,
            )
            raise


# --- Module Notes -----------------------------------------------------------
# Writes carry `Content-Type: application/json`; reads carry no body and no Content-Type.
