"""
Hetzner Robot Python Client.

An async Python client for the Hetzner Robot webservice.

Example:
    ```python
    from hetzner_robot import RobotClient, RobotConfig

    config = RobotConfig(username="#ws+user", password="secret")

    async with RobotClient(config) as client:
        # List servers
        print(await client.query_servers())

        # Work with a single server
        server = client.register_server("1.2.3.4")
        await server.update_reverse_dns("db-1.example.com")
    ```
"""

from hetzner_robot.client import RobotClient
from hetzner_robot.config import RobotConfig
from hetzner_robot.exceptions import (
    APIError,
    ConfigurationError,
    MissingArgumentError,
    NetworkError,
    NotFoundError,
    RobotError,
    UnauthorizedError,
)
from hetzner_robot.handles import ServerHandle, StorageBoxHandle
from hetzner_robot.models.options import (
    Architecture,
    LinuxBootOptions,
    PanelBootOptions,
    ResetType,
    TrafficWarningConfig,
    VncBootOptions,
    VServerCommand,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "RobotClient",
    "RobotConfig",
    # Handles
    "ServerHandle",
    "StorageBoxHandle",
    # Models
    "Architecture",
    "ResetType",
    "VServerCommand",
    "VncBootOptions",
    "LinuxBootOptions",
    "PanelBootOptions",
    "TrafficWarningConfig",
    # Exceptions
    "RobotError",
    "ConfigurationError",
    "MissingArgumentError",
    "APIError",
    "UnauthorizedError",
    "NotFoundError",
    "NetworkError",
]
