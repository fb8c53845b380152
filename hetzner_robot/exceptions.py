"""
Hetzner Robot exception hierarchy.

All exceptions inherit from RobotError for easy catching.
"""

from typing import Any


class RobotError(Exception):
    """Base exception for all hetzner_robot errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(RobotError, ValueError):
    """Client configuration is missing or invalid."""


class MissingArgumentError(RobotError, ValueError):
    """A required call argument was not supplied."""


class APIError(RobotError):
    """
    The Robot API answered with a non-success status.

    Renders as ``"<code>: <message>"``, the remote error code and message
    taken from the response body.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        status_code: int,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.endpoint = endpoint

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class UnauthorizedError(APIError):
    """Credentials were rejected (HTTP 401)."""


class NotFoundError(APIError):
    """Resource not found (server, storage box, key)."""


class NetworkError(RobotError):
    """Network-level error (connection failed, timeout)."""
