"""
closeio_client.errors

Fatal exceptions raised by the client.

Responsibilities:
- Signal programming errors that must not be turned into a `Failure` result:
  unserialisable payloads and responses no mapping rule recognises.
"""

from __future__ import annotations

from typing import Any


class CloseIoError(Exception):
    pass


class PayloadEncodingError(CloseIoError, TypeError):
    """
    Raised before dispatch when a payload cannot be encoded as JSON.
    """


class UnhandledResponseError(CloseIoError):
    """
    Raised when a response matches none of the result rules.
    `body` is the decoded body (`JsonBody` or `TextBody`).
    """

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(f"unhandled Close.io response: status={status_code} body={body!r}")
        self.status_code = status_code
        self.body = body


# --- Module Notes -----------------------------------------------------------
# Expected API failures (404 error, 400 field errors, transport errors) are values,
# see `closeio_client.pipeline.results`.
