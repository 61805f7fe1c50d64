"""Known upstream records and request payloads used by the e2e suites."""

from typing import Any, Final

__all__ = ["COUNTRIES", "HTTPBIN_HEADERS", "HTTPBIN_PARAMS", "KNOWN_POST", "KNOWN_USER"]

KNOWN_USER: Final[dict[str, Any]] = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
}

KNOWN_POST: Final[dict[str, Any]] = {
    "id": 1,
    "title": "sunt aut facere repellat provident occaecati excepturi optio reprehenderit",
    "userId": 1,
}

COUNTRIES: Final[dict[str, dict[str, Any]]] = {
    "usa": {"name": "United States", "code": "USA", "region": "Americas"},
    "canada": {"name": "Canada", "code": "CAN", "capital": "Ottawa", "region": "Americas"},
}

HTTPBIN_HEADERS: Final[dict[str, str]] = {
    "X-Custom-Header": "Test Value",
    "X-API-Key": "test-api-key-123",
    "User-Agent": "apisuite Test Agent",
}

HTTPBIN_PARAMS: Final[dict[str, str]] = {
    "param1": "value1",
    "param2": "value2",
    "number": "123",
}
