"""SSH key endpoints."""

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.http_client import PendingResult
from hetzner_robot.core.validation import require

FINGERPRINT_MISSING = "SSH key fingerprint is missing."


class SSHKeyEndpoints(EndpointGroup):
    """Manage the SSH keys stored in the account, addressed by fingerprint."""

    def query_ssh_keys(self) -> PendingResult:
        """List all SSH keys."""
        return self._http.request("GET", "/key")

    def query_ssh_key(self, fingerprint: str) -> PendingResult:
        """Get a single SSH key."""
        require(fingerprint, FINGERPRINT_MISSING)
        return self._http.request("GET", f"/key/{fingerprint}")

    def add_ssh_key(self, key_name: str, key: str) -> PendingResult:
        """
        Upload a new public key.

        Args:
            key_name: Display name.
            key: Public key in OpenSSH or SSH2 format.
        """
        require(key_name, "SSH key name is missing.")
        require(key, "SSH key is missing.")
        return self._http.request("POST", "/key", data={"name": key_name, "data": key})

    def remove_ssh_key(self, fingerprint: str) -> PendingResult:
        require(fingerprint, FINGERPRINT_MISSING)
        return self._http.request("DELETE", f"/key/{fingerprint}")

    def update_ssh_key_name(self, fingerprint: str, new_name: str) -> PendingResult:
        """Rename an SSH key."""
        require(fingerprint, FINGERPRINT_MISSING)
        require(new_name, "New SSH key name is missing.")
        return self._http.request("POST", f"/key/{fingerprint}", data={"name": new_name})
