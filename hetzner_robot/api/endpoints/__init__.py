"""Robot API endpoint groups, one mixin per resource family."""

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.endpoints.boot import BootEndpoints, BootTarget
from hetzner_robot.api.endpoints.keys import SSHKeyEndpoints
from hetzner_robot.api.endpoints.rdns import ReverseDnsEndpoints
from hetzner_robot.api.endpoints.servers import ServerEndpoints
from hetzner_robot.api.endpoints.storage_boxes import StorageBoxEndpoints
from hetzner_robot.api.endpoints.vservers import VServerEndpoints

__all__ = [
    "EndpointGroup",
    "BootEndpoints",
    "BootTarget",
    "ServerEndpoints",
    "ReverseDnsEndpoints",
    "SSHKeyEndpoints",
    "StorageBoxEndpoints",
    "VServerEndpoints",
]
