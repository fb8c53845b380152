"""
Live Robot API fixtures.

Integration tests only run when webservice credentials are exported as
ROBOT_TEST_USERNAME and ROBOT_TEST_PASSWORD. ROBOT_TEST_BASE_URL optionally
points them at another endpoint.
"""

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from hetzner_robot.client import RobotClient
from hetzner_robot.config import DEFAULT_BASE_URL, RobotConfig

CREDENTIAL_VARIABLES = ("ROBOT_TEST_USERNAME", "ROBOT_TEST_PASSWORD")

# The live webservice is slower than the one-second library default.
LIVE_TIMEOUT = 10.0


def _unset_variables() -> list[str]:
    return [name for name in CREDENTIAL_VARIABLES if not os.getenv(name)]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    unset = _unset_variables()
    # Selecting integration tests explicitly lets the fixture fail loudly instead.
    if not unset or "integration" in (config.option.markexpr or ""):
        return
    skip = pytest.mark.skip(reason=f"{', '.join(unset)} not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def live_config() -> RobotConfig:
    unset = _unset_variables()
    if unset:
        pytest.fail(f"Integration tests need {', '.join(unset)}")
    return RobotConfig(
        username=os.environ["ROBOT_TEST_USERNAME"],
        password=os.environ["ROBOT_TEST_PASSWORD"],
        base_url=os.getenv("ROBOT_TEST_BASE_URL", DEFAULT_BASE_URL),
        connect_timeout=LIVE_TIMEOUT,
        response_timeout=LIVE_TIMEOUT,
    )


@pytest_asyncio.fixture
async def live_client(live_config: RobotConfig) -> AsyncIterator[RobotClient]:
    async with RobotClient(live_config) as client:
        yield client
