from collections.abc import AsyncIterator

import httpx
import pytest

from apisuite import ApiHelper
from apisuite.models.config import Settings


def _client(base_url: str, settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url, timeout=settings.request_timeout, follow_redirects=True
    )


@pytest.fixture
async def jsonplaceholder(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    async with _client(settings.jsonplaceholder_url, settings) as client:
        yield client


@pytest.fixture
async def restcountries(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    async with _client(settings.restcountries_url, settings) as client:
        yield client


@pytest.fixture
async def httpbin(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    async with _client(settings.httpbin_url, settings) as client:
        yield client


@pytest.fixture
async def api_helper(settings: Settings) -> AsyncIterator[ApiHelper]:
    """Helper around a client with no base URL, for tests that address several services."""
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        yield ApiHelper(client)
