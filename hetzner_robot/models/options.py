"""
Request option models.

Typed replacements for the option fields accepted by the boot, traffic
and command endpoints. Required fields are checked on construction.
"""

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Any

from hetzner_robot.core.validation import require


class Architecture(IntEnum):
    """Installation architecture in bits."""

    X86 = 32
    X86_64 = 64


class ResetType(StrEnum):
    """Reset methods accepted by ``/reset``."""

    SOFTWARE = "sw"
    HARDWARE = "hw"
    MANUAL = "man"
    POWER = "power"
    POWER_LONG = "power_long"


class VServerCommand(StrEnum):
    """Virtual server lifecycle commands."""

    START = "start"
    STOP = "stop"
    SHUTDOWN = "shutdown"


DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True, kw_only=True)
class VncBootOptions:
    """Options for a VNC installation."""

    distribution: str
    architecture: int | None = Architecture.X86_64
    language: str | None = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        require(self.distribution, "Installation distribution is missing.")

    def to_form(self) -> dict[str, Any]:
        return {
            "dist": self.distribution,
            "arch": int(self.architecture or Architecture.X86_64),
            "lang": self.language or DEFAULT_LANGUAGE,
        }


@dataclass(frozen=True, kw_only=True)
class LinuxBootOptions(VncBootOptions):
    """Options for a Linux installation. ``keys`` are SSH key fingerprints."""

    keys: tuple[str, ...] | None = ()

    def to_form(self) -> dict[str, Any]:
        return {**super().to_form(), "authorized_key": list(self.keys or ())}


@dataclass(frozen=True, kw_only=True)
class PanelBootOptions(VncBootOptions):
    """Options for a Plesk or cPanel installation."""

    hostname: str

    def __post_init__(self) -> None:
        super().__post_init__()
        require(self.hostname, "Installation hostname is missing.")

    def to_form(self) -> dict[str, Any]:
        return {**super().to_form(), "hostname": self.hostname}


@dataclass(frozen=True, kw_only=True)
class TrafficWarningConfig:
    """
    Traffic warning settings for a single IP.

    Attributes:
        enable_warnings: Whether traffic warnings are sent.
        hourly_threshold: Hourly limit in MB.
        daily_threshold: Daily limit in MB.
        monthly_threshold: Monthly limit in GB.
    """

    enable_warnings: bool
    hourly_threshold: int
    daily_threshold: int
    monthly_threshold: int

    def __post_init__(self) -> None:
        require(self.enable_warnings, "Traffic warning enable switch is missing.")
        require(self.hourly_threshold, "Hourly traffic threshold is missing.")
        require(self.daily_threshold, "Daily traffic threshold is missing.")
        require(self.monthly_threshold, "Monthly traffic threshold is missing.")

    def to_form(self) -> dict[str, Any]:
        return {
            "traffic_warnings": self.enable_warnings,
            "traffic_hourly": self.hourly_threshold,
            "traffic_daily": self.daily_threshold,
            "traffic_monthly": self.monthly_threshold,
        }
