"""
Robot API client layer.

Provides async HTTP communication with the Robot API.
"""

from hetzner_robot.api.http_client import (
    AsyncHttpClient,
    PendingResult,
    normalize_response,
    render_body,
)

__all__ = ["AsyncHttpClient", "PendingResult", "normalize_response", "render_body"]
