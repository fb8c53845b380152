from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

from hetzner_robot.client import RobotClient
from hetzner_robot.config import RobotConfig
from hetzner_robot.tests.utils.pseudo_api import PASSWORD, USERNAME, PseudoRobotAPI

PSEUDO_API_URL = "http://robot.test"


@pytest.fixture
def config() -> RobotConfig:
    return RobotConfig(username=USERNAME, password=PASSWORD, base_url=PSEUDO_API_URL)


@pytest.fixture
def pseudo_api() -> PseudoRobotAPI:
    return PseudoRobotAPI()


@pytest_asyncio.fixture
async def client(config: RobotConfig, pseudo_api: PseudoRobotAPI) -> AsyncIterator[RobotClient]:
    async with RobotClient(config, transport=pseudo_api) as robot:
        yield robot


@pytest.fixture
def mock_http() -> Mock:
    http = Mock()
    http.request = AsyncMock(return_value="[]")
    return http
