"""
closeio_client.auth

Authentication package.

Responsibilities:
- Credential providers (literal key, environment-variable key).
- Basic-auth pair construction.
"""

from closeio_client.auth.credentials import (
    CredentialProvider,
    EnvCredentials,
    LiteralCredentials,
    basic_auth_for,
    credentials_from_settings,
)

__all__ = [
    "CredentialProvider",
    "EnvCredentials",
    "LiteralCredentials",
    "basic_auth_for",
    "credentials_from_settings",
]
