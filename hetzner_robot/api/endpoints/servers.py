"""Server, IP, reset, wake-on-LAN and cancellation endpoints."""

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.http_client import PendingResult
from hetzner_robot.core.validation import is_missing, require
from hetzner_robot.models.options import ResetType, TrafficWarningConfig

SERVER_IP_MISSING = "Server IP is missing."


class ServerEndpoints(EndpointGroup):
    """Endpoints addressing dedicated servers by their main IP."""

    def query_servers(self) -> PendingResult:
        """List all servers of the account."""
        return self._http.request("GET", "/server")

    def query_server(self, ip_address: str) -> PendingResult:
        """Get a single server."""
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request("GET", f"/server/{ip_address}")

    def set_server_name(self, ip_address: str, new_name: str) -> PendingResult:
        """
        Rename a server.

        Args:
            ip_address: Main IP of the server.
            new_name: New server name.
        """
        require(ip_address, SERVER_IP_MISSING)
        require(new_name, "New server name is missing.")
        return self._http.request(
            "POST",
            f"/server/{ip_address}",
            data={"server_name": new_name},
        )

    def query_ips(self, ip_address: str | None = None) -> PendingResult:
        """List all IPs, optionally only those of one server."""
        data = {} if is_missing(ip_address) else {"server_ip": ip_address}
        return self._http.request("GET", "/ip", data=data)

    def query_ip(self, ip_address: str) -> PendingResult:
        """Get a single IP, including its traffic warning settings."""
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request("GET", f"/ip/{ip_address}")

    def change_traffic_warnings(
        self, ip_address: str, config: TrafficWarningConfig
    ) -> PendingResult:
        """
        Update the traffic warning settings of an IP.

        Args:
            ip_address: IP to update.
            config: New warning settings.
        """
        require(ip_address, SERVER_IP_MISSING)
        require(config, "Traffic warning configuration is missing.")
        return self._http.request("POST", f"/ip/{ip_address}", data=config.to_form())

    def query_reset(self, ip_address: str | None = None) -> PendingResult:
        """Get the reset options of all servers or of a single one."""
        endpoint = "/reset" if is_missing(ip_address) else f"/reset/{ip_address}"
        return self._http.request("GET", endpoint)

    def reset_server(
        self, ip_address: str, reset_type: ResetType | str = ResetType.SOFTWARE
    ) -> PendingResult:
        """
        Reset a server.

        Args:
            ip_address: Main IP of the server.
            reset_type: Reset method, software reset by default.
        """
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request(
            "POST",
            f"/reset/{ip_address}",
            data={"type": str(reset_type or ResetType.SOFTWARE)},
        )

    def query_wol(self, ip_address: str) -> PendingResult:
        """Get the wake-on-LAN status of a server."""
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request("GET", f"/wol/{ip_address}")

    def wake_server(self, ip_address: str) -> PendingResult:
        """Send a wake-on-LAN packet to a server."""
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request(
            "POST",
            f"/wol/{ip_address}",
            data={"server_ip": ip_address},
        )

    def query_cancellation_status(self, ip_address: str) -> PendingResult:
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request("GET", f"/server/{ip_address}/cancellation")

    def create_cancellation(
        self,
        ip_address: str,
        cancellation_date: str,
        cancellation_reason: str | None = None,
    ) -> PendingResult:
        """
        Cancel a server.

        Args:
            ip_address: Main IP of the server.
            cancellation_date: Date in ``YYYY-MM-DD`` format, or ``"now"``.
            cancellation_reason: Optional free-text reason.
        """
        require(ip_address, SERVER_IP_MISSING)
        require(cancellation_date, "Server cancellation date is missing.")
        return self._http.request(
            "POST",
            f"/server/{ip_address}/cancellation",
            data={
                "cancellation_date": cancellation_date,
                "cancellation_reason": cancellation_reason,
            },
        )

    def remove_cancellation(self, ip_address: str) -> PendingResult:
        """Withdraw a pending cancellation."""
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request("DELETE", f"/server/{ip_address}/cancellation")
