"""
Hetzner Robot client configuration.
"""

from dataclasses import dataclass

from hetzner_robot.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://robot-ws.your-server.de/"


@dataclass(frozen=True, kw_only=True)
class RobotConfig:
    """
    Attributes:
        username: Robot webservice username.
        password: Robot webservice password.
        base_url: Base URL for the Robot API.
        connect_timeout: Connection timeout in seconds.
        response_timeout: Response (read) timeout in seconds.
        user_agent: User-Agent header value.
    """

    username: str = ""
    password: str = ""
    base_url: str = DEFAULT_BASE_URL
    connect_timeout: float = 1.0
    response_timeout: float = 1.0
    user_agent: str = "HetznerRobot-Python/1.0"

    def __post_init__(self) -> None:
        if not self.username:
            msg = "Missing API username"
            raise ConfigurationError(msg)
        if not self.password:
            msg = "Missing API password"
            raise ConfigurationError(msg)
        if not self.base_url:
            msg = "base_url must not be empty"
            raise ConfigurationError(msg)
        if self.connect_timeout <= 0:
            msg = "connect_timeout must be positive"
            raise ConfigurationError(msg)
        if self.response_timeout <= 0:
            msg = "response_timeout must be positive"
            raise ConfigurationError(msg)

        # frozen, so bypass __setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/") + "/")
