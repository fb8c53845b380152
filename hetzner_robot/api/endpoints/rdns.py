"""Reverse DNS endpoints."""

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.endpoints.servers import SERVER_IP_MISSING
from hetzner_robot.api.http_client import PendingResult
from hetzner_robot.core.validation import is_missing, require

PTR_MISSING = "Pointer record name is missing."


class ReverseDnsEndpoints(EndpointGroup):
    """Manage PTR records of server IPs."""

    def query_reverse_dns(self, ip_address: str | None = None) -> PendingResult:
        """Get all reverse DNS entries, or the entry of a single IP."""
        endpoint = "/rdns" if is_missing(ip_address) else f"/rdns/{ip_address}"
        return self._http.request("GET", endpoint)

    def set_reverse_dns(self, ip_address: str, pointer_record: str) -> PendingResult:
        """Create a reverse DNS entry."""
        require(ip_address, SERVER_IP_MISSING)
        require(pointer_record, PTR_MISSING)
        return self._http.request("PUT", f"/rdns/{ip_address}", data={"ptr": pointer_record})

    def update_reverse_dns(self, ip_address: str, pointer_record: str) -> PendingResult:
        """Create or update a reverse DNS entry."""
        require(ip_address, SERVER_IP_MISSING)
        require(pointer_record, PTR_MISSING)
        return self._http.request("POST", f"/rdns/{ip_address}", data={"ptr": pointer_record})

    def remove_reverse_dns(self, ip_address: str) -> PendingResult:
        require(ip_address, SERVER_IP_MISSING)
        return self._http.request("DELETE", f"/rdns/{ip_address}")
