from unittest.mock import Mock

import httpx
import pytest

from apisuite import ApiHelper
from apisuite.logging import configure_logging
from apisuite.models.config import Settings


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run tests that call the public APIs over the network",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="network test, pass --run-e2e to run it")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings loaded from the environment (and .env), with logging configured to match."""
    loaded = Settings()
    configure_logging(loaded.log_level, log_file=loaded.log_file)
    return loaded


class RecordingSleep:
    """Stands in for asyncio.sleep and remembers every requested delay."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def offline_helper(recording_sleep: RecordingSleep) -> ApiHelper:
    """Helper around a client that must never be used, with a non-waiting sleep."""
    return ApiHelper(Mock(spec=httpx.AsyncClient), sleep=recording_sleep)
