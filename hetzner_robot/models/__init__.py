"""
Request models for the Robot API.

These are immutable (frozen) dataclasses and enums used to build request
payloads.
"""

from hetzner_robot.models.options import (
    Architecture,
    LinuxBootOptions,
    PanelBootOptions,
    ResetType,
    TrafficWarningConfig,
    VncBootOptions,
    VServerCommand,
)

__all__ = [
    "Architecture",
    "ResetType",
    "VServerCommand",
    "VncBootOptions",
    "LinuxBootOptions",
    "PanelBootOptions",
    "TrafficWarningConfig",
]
