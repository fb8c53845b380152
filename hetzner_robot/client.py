"""
Hetzner Robot client facade.

This is the main entry point for users of the library. It combines every
endpoint group on one object and hands out cached resource handles.
"""

from typing import Self

import httpx
import structlog

from hetzner_robot.api.endpoints import (
    BootEndpoints,
    ReverseDnsEndpoints,
    ServerEndpoints,
    SSHKeyEndpoints,
    StorageBoxEndpoints,
    VServerEndpoints,
)
from hetzner_robot.api.http_client import AsyncHttpClient
from hetzner_robot.config import RobotConfig
from hetzner_robot.core.registry import HandleRegistry
from hetzner_robot.exceptions import ConfigurationError
from hetzner_robot.handles import ServerHandle, StorageBoxHandle, mirror_endpoints

logger = structlog.get_logger(__name__)


class RobotClient(
    ServerEndpoints,
    BootEndpoints,
    ReverseDnsEndpoints,
    SSHKeyEndpoints,
    StorageBoxEndpoints,
    VServerEndpoints,
):
    """
    Async client for the Hetzner Robot webservice.

    Endpoint methods validate their arguments immediately and return a
    coroutine. Awaiting it performs exactly one request and yields the
    response body as indented JSON, or raises APIError / NetworkError.

    Example:
        ```python
        config = RobotConfig(username="#ws+user", password="secret")
        async with RobotClient(config) as client:
            print(await client.query_servers())

            server = client.register_server("1.2.3.4")
            await server.set_server_name("db-1")
        ```

    Args:
        config: Client configuration.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        config: RobotConfig | None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client. No connection is opened here.

        Raises:
            ConfigurationError: If ``config`` is None.
        """
        if config is None:
            msg = "Missing configuration data"
            raise ConfigurationError(msg)

        self._config = config
        super().__init__(AsyncHttpClient(config, transport=transport))

        self._servers: HandleRegistry[str, ServerHandle] = HandleRegistry(
            self, ServerHandle, missing_message="Missing IP address"
        )
        self._storage_boxes: HandleRegistry[int | str, StorageBoxHandle] = HandleRegistry(
            self, StorageBoxHandle, missing_message="Missing storage box ID"
        )

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._http.__aenter__()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()
        logger.debug("Client closed")

    @property
    def config(self) -> RobotConfig:
        return self._config

    def register_server(self, ip_address: str) -> ServerHandle:
        """
        Get the handle for a server.

        Repeated calls with the same IP return the same handle object.

        Args:
            ip_address: Main IP of the server.

        Raises:
            MissingArgumentError: If ``ip_address`` is empty.
        """
        return self._servers.get_or_create(ip_address)

    def register_storage_box(self, storage_box_id: int | str) -> StorageBoxHandle:
        """
        Get the handle for a storage box.

        Repeated calls with the same ID return the same handle object.

        Args:
            storage_box_id: Storage box ID.

        Raises:
            MissingArgumentError: If ``storage_box_id`` is empty.
        """
        return self._storage_boxes.get_or_create(storage_box_id)


_REGISTRATION_METHODS = frozenset({"register_server", "register_storage_box"})

mirror_endpoints(RobotClient, ServerHandle, exclude=_REGISTRATION_METHODS)
mirror_endpoints(RobotClient, StorageBoxHandle, exclude=_REGISTRATION_METHODS)
