"""
Async HTTP client for the Robot API.

Wraps an ``httpx.AsyncClient`` carrying the basic-auth credentials and
timeouts, and normalizes every response into either an indented JSON
string or an APIError.
"""

import json
from collections.abc import Coroutine
from typing import Any, TypeAlias

import httpx
import structlog

from hetzner_robot.config import RobotConfig
from hetzner_robot.exceptions import APIError, NetworkError, NotFoundError, UnauthorizedError

logger = structlog.get_logger(__name__)

PendingResult: TypeAlias = Coroutine[Any, Any, str]

SUCCESS_STATUS_CODES = frozenset({httpx.codes.OK, httpx.codes.CREATED})

_NOT_JSON = object()


def render_body(body: Any) -> str:
    """
    Serialize a decoded response body as 2-space indented JSON.

    Falls back to ``str(body)`` when the body cannot be serialized.
    """
    try:
        return json.dumps(body, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(body)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return _NOT_JSON
    try:
        return response.json()
    except ValueError:
        return _NOT_JSON


def _build_api_error(response: httpx.Response, body: Any, endpoint: str | None) -> APIError:
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and "code" in error:
        code = str(error["code"])
        message = str(error.get("message", ""))
    else:
        code = str(response.status_code)
        message = response.reason_phrase

    if response.status_code == httpx.codes.UNAUTHORIZED:
        error_cls = UnauthorizedError
    elif response.status_code == httpx.codes.NOT_FOUND:
        error_cls = NotFoundError
    else:
        error_cls = APIError
    return error_cls(message, code=code, status_code=response.status_code, endpoint=endpoint)


def normalize_response(response: httpx.Response, endpoint: str | None = None) -> str:
    """
    Turn a completed HTTP exchange into the client's result value.

    Args:
        response: The completed response.
        endpoint: Endpoint path, attached to raised errors.

    Returns:
        The body as indented JSON for 200/201 responses. Bodies that are not
        JSON are returned as plain text.

    Raises:
        APIError: For any other status code.
    """
    body = _decode_body(response)

    if response.status_code not in SUCCESS_STATUS_CODES:
        raise _build_api_error(response, body, endpoint)

    if body is _NOT_JSON:
        return response.text
    return render_body(body)


def _drop_none(data: dict[str, Any] | None) -> dict[str, Any] | None:
    if data is None:
        return None
    return {key: value for key, value in data.items() if value is not None}


class AsyncHttpClient:
    """Async HTTP client for the Robot API."""

    def __init__(
        self,
        config: RobotConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "AsyncHttpClient":
        self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        # No await between check and assignment, so this is safe under asyncio.
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                auth=httpx.BasicAuth(self._config.username, self._config.password),
                timeout=httpx.Timeout(
                    self._config.response_timeout,
                    connect=self._config.connect_timeout,
                ),
                transport=self._transport,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self._config.user_agent,
                },
            )
        return self._client

    @property
    def is_open(self) -> bool:
        """Check if the underlying connection pool exists."""
        return self._client is not None

    async def aclose(self) -> None:
        """Close the HTTP client. It is re-created on the next request."""
        if self._client is None:
            logger.debug("Client not open.")
            return
        client, self._client = self._client, None
        await client.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        data: dict[str, Any] | None = None,
    ) -> str:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            endpoint: API endpoint (e.g., "/server/1.2.3.4").
            data: Request fields. Sent as query parameters for GET and as a
                form-encoded body otherwise. None values are dropped.

        Returns:
            Normalized response text.

        Raises:
            APIError: If the API returns an error status.
            NetworkError: If the request fails due to network issues.
        """
        client = self._ensure_client()
        fields = _drop_none(data)
        if method == "GET":
            kwargs: dict[str, Any] = {"params": fields}
        else:
            kwargs = {"data": fields}

        try:
            response = await client.request(method, endpoint, **kwargs)
        except httpx.RequestError as e:
            logger.warning("Request failed", method=method, endpoint=endpoint, error=str(e))
            msg = f"{method} {endpoint} failed: {e}"
            raise NetworkError(msg) from e

        logger.debug(
            "Request completed",
            method=method,
            endpoint=endpoint,
            status=response.status_code,
        )
        return normalize_response(response, endpoint)
