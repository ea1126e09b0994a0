"""
tests.conftest

Shared fixtures for client tests.

Responsibilities:
- Provide the scripted Close.io stand-in (`tests.support.StubApi`).
- Provide a client wired to it with a literal test API key.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from closeio_client import CloseIoClient, Settings
from tests.support import API_KEY, StubApi


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=API_KEY)


@pytest.fixture
def stub_api() -> StubApi:
    return StubApi()


@pytest_asyncio.fixture
async def client(settings: Settings, stub_api: StubApi) -> AsyncIterator[CloseIoClient]:
    async with httpx.AsyncClient(transport=stub_api.transport()) as http:
        yield CloseIoClient(settings=settings, http=http)
