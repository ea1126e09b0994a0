"""
closeio_client.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the client (API key, base url, timeouts, logging).
- Hide the API key from repr/logging.
- Offer a cached settings instance for application wiring.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://app.close.io/api/v1"

# Marker for the indirect form of `api_key`: `env:CLOSE_TOKEN` reads $CLOSE_TOKEN per request.
ENV_REFERENCE_PREFIX = "env:"


class Settings(BaseSettings):
    """
    Client configuration.

    `api_key` accepts either the literal secret or `env:<VAR_NAME>`; the second form
    is resolved through `closeio_client.auth.credentials` on every request.
    """

    model_config = SettingsConfigDict(env_prefix="CLOSEIO_", case_sensitive=False)

    service_name: str = "closeio-client"
    log_level: str = "INFO"

    api_key: str = Field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL

    # Transport timeout is the only cancellation mechanism for a call.
    timeout_seconds: float = Field(default=30.0, gt=0)

    @property
    def api_key_env_var(self) -> str | None:
        if self.api_key.startswith(ENV_REFERENCE_PREFIX):
            return self.api_key[len(ENV_REFERENCE_PREFIX) :]
        return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars; the env-referenced key itself is never cached.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` explicitly instead of going through `get_settings`.
