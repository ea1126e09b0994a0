"""
tests.support

Scripted Close.io stand-in shared by the test modules.

Responsibilities:
- Record outgoing requests and answer them with a configured status/body or error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

API_KEY = "test-key"


@dataclass
class StubApi:
    """
    `body` dicts/lists are sent as JSON; str/bytes are sent verbatim with `content_type`.
    """

    status_code: int = 200
    body: Any = field(default_factory=lambda: {"id": "lead_123"})
    content_type: str | None = None
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (str, bytes)):
            headers = {"Content-Type": self.content_type} if self.content_type else None
            return httpx.Response(self.status_code, content=self.body, headers=headers)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)
