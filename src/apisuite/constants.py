"""Endpoint catalog, status codes and limits shared by the helper and the suites."""

from enum import Enum, IntEnum
from http import HTTPStatus
from typing import Final

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_POLL_INTERVAL_MS",
    "DEFAULT_TIMEOUT_MS",
    "HTTPBIN",
    "JSON_CONTENT_TYPE",
    "JSONPLACEHOLDER",
    "RESTCOUNTRIES",
    "EntityType",
    "ExpectedStatus",
    "ResponseTimeLimit",
]

JSON_CONTENT_TYPE: Final = "application/json"

DEFAULT_TIMEOUT_MS: Final = 5000
DEFAULT_POLL_INTERVAL_MS: Final = 100
DEFAULT_MAX_RETRIES: Final = 3


class EntityType(str, Enum):
    """Entity kinds the test-data factory has fixtures for."""

    USER = "user"
    POST = "post"
    COMMENT = "comment"


class ExpectedStatus(IntEnum):
    SUCCESS = HTTPStatus.OK
    CREATED = HTTPStatus.CREATED
    NO_CONTENT = HTTPStatus.NO_CONTENT
    BAD_REQUEST = HTTPStatus.BAD_REQUEST
    UNAUTHORIZED = HTTPStatus.UNAUTHORIZED
    FORBIDDEN = HTTPStatus.FORBIDDEN
    NOT_FOUND = HTTPStatus.NOT_FOUND
    INTERNAL_SERVER_ERROR = HTTPStatus.INTERNAL_SERVER_ERROR


class ResponseTimeLimit(IntEnum):
    """Response-time budgets in milliseconds."""

    FAST = 1000
    NORMAL = 3000
    SLOW = 5000
    VERY_SLOW = 10000


# Paths relative to each service's base URL (see Settings for the base URLs).
JSONPLACEHOLDER: Final = {
    "users": "/users",
    "posts": "/posts",
    "comments": "/comments",
    "albums": "/albums",
    "photos": "/photos",
    "todos": "/todos",
}

RESTCOUNTRIES: Final = {
    "all": "/all",
    "name": "/name",
    "code": "/alpha",
    "region": "/region",
    "capital": "/capital",
}

HTTPBIN: Final = {
    "get": "/get",
    "post": "/post",
    "put": "/put",
    "delete": "/delete",
    "headers": "/headers",
    "status": "/status",
    "delay": "/delay",
    "auth": "/basic-auth",
}
