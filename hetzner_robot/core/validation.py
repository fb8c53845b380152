"""Presence checks for call arguments and resource identifiers."""

from typing import Any

from hetzner_robot.exceptions import MissingArgumentError


def is_missing(value: Any) -> bool:
    """Return True for None and for empty or whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require(value: Any, message: str) -> None:
    """
    Raise MissingArgumentError if a required argument is absent.

    Args:
        value: Argument value to check.
        message: Error message naming the missing argument.

    Raises:
        MissingArgumentError: If ``value`` is missing.
    """
    if is_missing(value):
        raise MissingArgumentError(message)
