"""Internal building blocks: handle registry and argument validation."""

from hetzner_robot.core.registry import HandleRegistry
from hetzner_robot.core.validation import is_missing, require

__all__ = ["HandleRegistry", "is_missing", "require"]
