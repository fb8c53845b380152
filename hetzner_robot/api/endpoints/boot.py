"""
Boot configuration endpoints.

Each target (rescue, linux, vnc, windows, plesk, cpanel) lives under
``/boot/{ip}/{target}``: GET queries it, POST activates it for the next
boot and DELETE deactivates it.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.endpoints.servers import SERVER_IP_MISSING
from hetzner_robot.api.http_client import PendingResult
from hetzner_robot.core.validation import require
from hetzner_robot.models.options import (
    DEFAULT_LANGUAGE,
    Architecture,
    LinuxBootOptions,
    PanelBootOptions,
    VncBootOptions,
)

OPTIONS_MISSING = "Installation options are missing."


class BootTarget(StrEnum):
    """Boot configurations available under ``/boot/{ip}``."""

    RESCUE = "rescue"
    LINUX = "linux"
    VNC = "vnc"
    WINDOWS = "windows"
    PLESK = "plesk"
    CPANEL = "cpanel"


class BootEndpoints(EndpointGroup):
    """Query, activate and deactivate boot configurations of a server."""

    def _boot_path(self, ip_address: str, target: BootTarget | None = None) -> str:
        require(ip_address, SERVER_IP_MISSING)
        if target is None:
            return f"/boot/{ip_address}"
        return f"/boot/{ip_address}/{target.value}"

    def _query(self, ip_address: str, target: BootTarget) -> PendingResult:
        return self._http.request("GET", self._boot_path(ip_address, target))

    def _enable(self, ip_address: str, target: BootTarget, data: dict[str, Any]) -> PendingResult:
        return self._http.request("POST", self._boot_path(ip_address, target), data=data)

    def _disable(self, ip_address: str, target: BootTarget) -> PendingResult:
        return self._http.request("DELETE", self._boot_path(ip_address, target))

    def _query_last(self, ip_address: str, target: BootTarget) -> PendingResult:
        return self._http.request("GET", f"{self._boot_path(ip_address, target)}/last")

    def query_boot_config(self, ip_address: str) -> PendingResult:
        """Get the state of all boot configurations of a server."""
        return self._http.request("GET", self._boot_path(ip_address))

    # Rescue

    def query_rescue_boot_config(self, ip_address: str) -> PendingResult:
        return self._query(ip_address, BootTarget.RESCUE)

    def enable_rescue_boot(
        self,
        ip_address: str,
        operating_system: str,
        architecture: int = Architecture.X86_64,
        keys: Iterable[str] = (),
    ) -> PendingResult:
        """
        Activate the rescue system.

        Args:
            ip_address: Main IP of the server.
            operating_system: Rescue system, e.g. ``"linux"``.
            architecture: 32 or 64 bit.
            keys: Fingerprints of SSH keys to install.
        """
        require(ip_address, SERVER_IP_MISSING)
        require(operating_system, "Operating system is missing.")
        data = {
            "os": operating_system,
            "arch": int(architecture or Architecture.X86_64),
            "authorized_key": list(keys or ()),
        }
        return self._enable(ip_address, BootTarget.RESCUE, data)

    def disable_rescue_boot(self, ip_address: str) -> PendingResult:
        return self._disable(ip_address, BootTarget.RESCUE)

    def query_last_rescue_boot(self, ip_address: str) -> PendingResult:
        """Get the data of the last rescue activation, including its password."""
        return self._query_last(ip_address, BootTarget.RESCUE)

    # Linux

    def query_linux_boot_config(self, ip_address: str) -> PendingResult:
        return self._query(ip_address, BootTarget.LINUX)

    def enable_linux_boot(self, ip_address: str, options: LinuxBootOptions) -> PendingResult:
        """Schedule a Linux installation for the next boot."""
        require(ip_address, SERVER_IP_MISSING)
        require(options, OPTIONS_MISSING)
        return self._enable(ip_address, BootTarget.LINUX, options.to_form())

    def disable_linux_boot(self, ip_address: str) -> PendingResult:
        return self._disable(ip_address, BootTarget.LINUX)

    def query_last_linux_boot(self, ip_address: str) -> PendingResult:
        """Get the data of the last Linux installation, including its password."""
        return self._query_last(ip_address, BootTarget.LINUX)

    # VNC

    def query_vnc_boot_config(self, ip_address: str) -> PendingResult:
        return self._query(ip_address, BootTarget.VNC)

    def enable_vnc_boot(self, ip_address: str, options: VncBootOptions) -> PendingResult:
        """Schedule a VNC installation for the next boot."""
        require(ip_address, SERVER_IP_MISSING)
        require(options, OPTIONS_MISSING)
        return self._enable(ip_address, BootTarget.VNC, options.to_form())

    def disable_vnc_boot(self, ip_address: str) -> PendingResult:
        return self._disable(ip_address, BootTarget.VNC)

    # Windows

    def query_windows_boot_config(self, ip_address: str) -> PendingResult:
        return self._query(ip_address, BootTarget.WINDOWS)

    def enable_windows_boot(
        self, ip_address: str, language: str = DEFAULT_LANGUAGE
    ) -> PendingResult:
        """Schedule a Windows installation for the next boot."""
        require(ip_address, SERVER_IP_MISSING)
        return self._enable(
            ip_address, BootTarget.WINDOWS, {"lang": language or DEFAULT_LANGUAGE}
        )

    def disable_windows_boot(self, ip_address: str) -> PendingResult:
        return self._disable(ip_address, BootTarget.WINDOWS)

    # Plesk

    def query_plesk_boot_config(self, ip_address: str) -> PendingResult:
        return self._query(ip_address, BootTarget.PLESK)

    def enable_plesk_boot(self, ip_address: str, options: PanelBootOptions) -> PendingResult:
        """Schedule a Plesk installation for the next boot."""
        require(ip_address, SERVER_IP_MISSING)
        require(options, OPTIONS_MISSING)
        return self._enable(ip_address, BootTarget.PLESK, options.to_form())

    def disable_plesk_boot(self, ip_address: str) -> PendingResult:
        return self._disable(ip_address, BootTarget.PLESK)

    # cPanel

    def query_cpanel_boot_config(self, ip_address: str) -> PendingResult:
        return self._query(ip_address, BootTarget.CPANEL)

    def enable_cpanel_boot(self, ip_address: str, options: PanelBootOptions) -> PendingResult:
        """Schedule a cPanel installation for the next boot."""
        require(ip_address, SERVER_IP_MISSING)
        require(options, OPTIONS_MISSING)
        return self._enable(ip_address, BootTarget.CPANEL, options.to_form())

    def disable_cpanel_boot(self, ip_address: str) -> PendingResult:
        return self._disable(ip_address, BootTarget.CPANEL)
