"""
Resource handles.

A handle binds a client to one resource identifier. Every client endpoint
that takes that identifier as its first argument is also available on the
handle, with the identifier filled in:

    ```python
    server = client.register_server("1.2.3.4")
    await server.query_server()        # client.query_server("1.2.3.4")
    await server.set_server_name("db") # client.set_server_name("1.2.3.4", "db")
    ```

Handles only keep a weak reference to their client.
"""

import functools
import inspect
import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from hetzner_robot.client import RobotClient


class ResourceHandle(ABC):
    """Base class for client-bound resource handles."""

    # Name of the client method parameter this handle fills in.
    identifier_parameter: ClassVar[str] = ""

    def __init__(self, client: "RobotClient") -> None:
        self._client_ref = weakref.ref(client)

    @property
    def client(self) -> "RobotClient":
        """
        The owning client.

        Raises:
            ReferenceError: If the client has been garbage collected.
        """
        client = self._client_ref()
        if client is None:
            msg = "The client owning this handle no longer exists"
            raise ReferenceError(msg)
        return client

    @property
    @abstractmethod
    def identifier(self) -> Any:
        """Identifier filled into mirrored endpoint calls."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.identifier!r})"


class ServerHandle(ResourceHandle):
    """A server, identified by its main IP address."""

    identifier_parameter = "ip_address"

    def __init__(self, client: "RobotClient", ip_address: str) -> None:
        super().__init__(client)
        self.ip = ip_address

    @property
    def identifier(self) -> str:
        return self.ip


class StorageBoxHandle(ResourceHandle):
    """A storage box, identified by its numeric ID."""

    identifier_parameter = "storage_box_id"

    def __init__(self, client: "RobotClient", storage_box_id: int | str) -> None:
        super().__init__(client)
        self.id = storage_box_id

    @property
    def identifier(self) -> int | str:
        return self.id


def _make_forwarder(name: str, func: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(func)
    def forward(self: ResourceHandle, *args: Any, **kwargs: Any) -> Any:
        return getattr(self.client, name)(self.identifier, *args, **kwargs)

    # Drop the bound identifier from the advertised signature.
    signature = inspect.signature(func)
    params = list(signature.parameters.values())
    forward.__signature__ = signature.replace(parameters=[params[0], *params[2:]])
    return forward


def mirror_endpoints(
    client_cls: type,
    handle_cls: type[ResourceHandle],
    *,
    exclude: frozenset[str] = frozenset(),
) -> list[str]:
    """
    Copy client endpoints onto a handle type as identifier-bound methods.

    Runs once per handle type when the client class is defined. A public
    method of ``client_cls`` is mirrored when its first parameter after
    ``self`` is ``handle_cls.identifier_parameter``.

    Args:
        client_cls: Class whose methods are mirrored.
        handle_cls: Handle type receiving the methods.
        exclude: Method names never mirrored.

    Returns:
        Names of the mirrored methods.
    """
    mirrored = []
    for name, func in inspect.getmembers(client_cls, inspect.isfunction):
        if name.startswith("_") or name in exclude:
            continue
        params = list(inspect.signature(func).parameters)
        if len(params) < 2 or params[1] != handle_cls.identifier_parameter:
            continue
        setattr(handle_cls, name, _make_forwarder(name, func))
        mirrored.append(name)
    return mirrored
