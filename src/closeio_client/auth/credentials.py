"""
closeio_client.auth.credentials

Credential providers for Close.io HTTP Basic auth.

Responsibilities:
- Resolve the API key once per request through an explicit provider interface.
- Support a literal key and a key read from an environment variable at call time.
- Build the `(username, password)` pair used for Basic auth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from closeio_client.settings import Settings


@runtime_checkable
class CredentialProvider(Protocol):
    def resolve(self) -> str | None: ...


@dataclass(frozen=True, slots=True)
class LiteralCredentials:
    api_key: str

    def resolve(self) -> str | None:
        return self.api_key

    def __repr__(self) -> str:
        return "LiteralCredentials(api_key=<hidden>)"


@dataclass(frozen=True, slots=True)
class EnvCredentials:
    """
    Reads the key from `variable` on every call; an unset variable resolves to None.
    """

    variable: str

    def resolve(self) -> str | None:
        return os.environ.get(self.variable)


def credentials_from_settings(settings: Settings) -> CredentialProvider:
    env_var = settings.api_key_env_var
    if env_var is not None:
        return EnvCredentials(variable=env_var)
    return LiteralCredentials(api_key=settings.api_key)


def basic_auth_for(provider: CredentialProvider) -> tuple[str, str]:
    # Close.io uses the API key as username with an empty password.
    # A missing key is sent as an empty username; the API answers for it.
    return (provider.resolve() or "", "")


# --- Module Notes -----------------------------------------------------------
# Providers are stateless, so one instance can be shared by concurrent calls.
