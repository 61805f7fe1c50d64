import asyncio
import time
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, TypeVar

import httpx
from loguru import logger

from apisuite.client.resilience import SleepFn, retry_request, wait_for_condition
from apisuite.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_MS,
    JSON_CONTENT_TYPE,
    EntityType,
)
from apisuite.data.factory import create_test_data, generate_random_data
from apisuite.exceptions import ResponseAssertionError
from apisuite.models.fixtures import SyntheticRecord

__all__ = ["ApiHelper", "monotonic_ms"]

T = TypeVar("T")

HeaderTypes = Mapping[str, str] | httpx.Headers | None
ParamTypes = Mapping[str, Any] | None


def monotonic_ms() -> float:
    """Current reading of the clock used by `ApiHelper.validate_response_time`."""
    return time.monotonic() * 1000


class ApiHelper:
    """
    Request, validation and test-data utilities for API tests.

    The helper owns nothing but the injected client: it never opens, closes
    or configures it, and keeps no state between calls.
    """

    def __init__(self, client: httpx.AsyncClient, *, sleep: SleepFn = asyncio.sleep) -> None:
        """
        Args:
            client: Client every request goes through (base URL, timeouts and
                transport are the caller's business).
            sleep: Coroutine used by polling and retry back-off.
        """
        self.client = client
        self._sleep = sleep

    # --- requests ---

    @staticmethod
    def _json_headers(headers: HeaderTypes) -> httpx.Headers:
        merged = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
        if headers:
            # Headers.update replaces case-insensitively, so "content-type" wins too
            merged.update(headers)
        return merged

    async def get(
        self, url: str, *, headers: HeaderTypes = None, params: ParamTypes = None, **kwargs: Any
    ) -> httpx.Response:
        logger.debug(f"GET {url}")
        return await self.client.get(url, headers=headers, params=params, **kwargs)

    async def post(
        self,
        url: str,
        data: Any = None,
        *,
        headers: HeaderTypes = None,
        params: ParamTypes = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """POST `data` as JSON; caller headers override the default Content-Type."""
        logger.debug(f"POST {url}")
        return await self.client.post(
            url, json=data, headers=self._json_headers(headers), params=params, **kwargs
        )

    async def put(
        self,
        url: str,
        data: Any = None,
        *,
        headers: HeaderTypes = None,
        params: ParamTypes = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """PUT `data` as JSON; caller headers override the default Content-Type."""
        logger.debug(f"PUT {url}")
        return await self.client.put(
            url, json=data, headers=self._json_headers(headers), params=params, **kwargs
        )

    async def delete(
        self, url: str, *, headers: HeaderTypes = None, params: ParamTypes = None, **kwargs: Any
    ) -> httpx.Response:
        logger.debug(f"DELETE {url}")
        return await self.client.delete(url, headers=headers, params=params, **kwargs)

    # --- validation ---

    @staticmethod
    def validate_status(response: httpx.Response, expected_status: int) -> None:
        if response.status_code != expected_status:
            raise ResponseAssertionError(
                f"Expected status {expected_status}, got {response.status_code}"
            )

    @staticmethod
    async def validate_json_response(response: httpx.Response) -> Any:
        """
        Check the content type, then read and parse the body exactly once.

        Malformed JSON raises json.JSONDecodeError unchanged.
        """
        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE not in content_type:
            raise ResponseAssertionError(
                f"Expected a {JSON_CONTENT_TYPE} response, got content-type {content_type!r}"
            )
        await response.aread()
        return response.json()

    async def validate_array_response(self, response: httpx.Response) -> list[Any]:
        data = await self.validate_json_response(response)
        if not isinstance(data, list):
            raise ResponseAssertionError(
                f"Expected a JSON array, got {type(data).__name__}"
            )
        return data

    async def validate_object_response(
        self, response: httpx.Response, required_fields: Iterable[str]
    ) -> dict[str, Any]:
        """
        Check that the body is a JSON object holding every required key.

        Only key presence is checked: a field set to null counts as present.
        """
        data = await self.validate_json_response(response)
        if not isinstance(data, dict):
            raise ResponseAssertionError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        missing = [field for field in required_fields if field not in data]
        if missing:
            raise ResponseAssertionError(f"Response is missing required fields: {missing}")
        return data

    @staticmethod
    def validate_response_time(start_ms: float, max_time_ms: float = DEFAULT_TIMEOUT_MS) -> float:
        """
        Assert that less than `max_time_ms` has passed since `start_ms`.

        `start_ms` must come from `monotonic_ms()`.

        Returns:
            The elapsed time in milliseconds.
        """
        elapsed = monotonic_ms() - start_ms
        if elapsed >= max_time_ms:
            raise ResponseAssertionError(
                f"Response took {elapsed:.0f}ms, limit is {max_time_ms}ms"
            )
        return elapsed

    # --- test data ---

    @staticmethod
    def create_test_data(
        entity_type: EntityType | str, overrides: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return create_test_data(entity_type, overrides)

    @staticmethod
    def generate_random_data() -> SyntheticRecord:
        return generate_random_data()

    # --- waiting ---

    async def wait_for_condition(
        self, condition: Callable[[], Awaitable[bool]], timeout_ms: float = DEFAULT_TIMEOUT_MS
    ) -> bool:
        return await wait_for_condition(condition, timeout_ms, sleep=self._sleep)

    async def retry_request(
        self, request_fn: Callable[[], Awaitable[T]], max_retries: int = DEFAULT_MAX_RETRIES
    ) -> T:
        return await retry_request(request_fn, max_retries, sleep=self._sleep)
