"""Shared base for endpoint groups."""

from hetzner_robot.api.http_client import AsyncHttpClient


class EndpointGroup:
    """
    Base class for a family of Robot API endpoints.

    Endpoint methods are plain (non-async) methods: they validate their
    arguments immediately and return the pending request coroutine, so a
    missing argument raises at call time rather than when awaited.
    """

    def __init__(self, http_client: AsyncHttpClient) -> None:
        """
        Args:
            http_client: Configured async HTTP client.
        """
        self._http = http_client
