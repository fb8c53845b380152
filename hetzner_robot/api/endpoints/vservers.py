"""Virtual server command endpoints."""

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.endpoints.servers import SERVER_IP_MISSING
from hetzner_robot.api.http_client import PendingResult
from hetzner_robot.core.validation import require
from hetzner_robot.models.options import VServerCommand


class VServerEndpoints(EndpointGroup):
    """Start, stop and shut down virtual servers."""

    def _send_command(self, ip_address: str, command: VServerCommand) -> PendingResult:
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request(
            "POST",
            f"/vserver/{ip_address}/command",
            data={"type": command.value},
        )

    def start_vserver(self, ip_address: str) -> PendingResult:
        """Power on a virtual server."""
        return self._send_command(ip_address, VServerCommand.START)

    def stop_vserver(self, ip_address: str) -> PendingResult:
        """Hard power off a virtual server."""
        return self._send_command(ip_address, VServerCommand.STOP)

    def shutdown_vserver(self, ip_address: str) -> PendingResult:
        """Send an ACPI shutdown to a virtual server."""
        return self._send_command(ip_address, VServerCommand.SHUTDOWN)
