"""Identity cache for resource handles."""

import weakref
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

import structlog

from hetzner_robot.core.validation import is_missing
from hetzner_robot.exceptions import MissingArgumentError

K = TypeVar("K", bound=Hashable)
H = TypeVar("H")

logger = structlog.get_logger(__name__)


class HandleRegistry(Generic[K, H]):
    """
    Memoizes one handle per identifier for a single owner.

    The registry is stored on its owner, so handles are never shared
    between owners even when identifiers match. The owner is only weakly
    referenced and entries live as long as the registry.
    """

    def __init__(
        self,
        owner: Any,
        factory: Callable[[Any, K], H],
        *,
        missing_message: str,
    ) -> None:
        """
        Args:
            owner: Object the handles are bound to.
            factory: Builds a new handle from ``(owner, identifier)``.
            missing_message: Error message for a missing identifier.
        """
        self._owner_ref = weakref.ref(owner)
        self._factory = factory
        self._missing_message = missing_message
        self._handles: dict[K, H] = {}

    def get_or_create(self, identifier: K) -> H:
        """
        Return the handle for ``identifier``, creating it on first use.

        Raises:
            MissingArgumentError: If ``identifier`` is None or empty. Nothing
                is cached in that case.
        """
        if is_missing(identifier):
            raise MissingArgumentError(self._missing_message)

        handle = self._handles.get(identifier)
        if handle is None:
            owner = self._owner_ref()
            if owner is None:
                msg = "Registry owner no longer exists"
                raise ReferenceError(msg)
            handle = self._factory(owner, identifier)
            self._handles[identifier] = handle
            logger.debug("Handle created", identifier=identifier)
        return handle

    def __len__(self) -> int:
        """Return number of cached handles."""
        return len(self._handles)

    def __contains__(self, identifier: object) -> bool:
        """Check if a handle exists for the identifier."""
        return identifier in self._handles

    def keys(self) -> list[K]:
        """Return list of all registered identifiers."""
        return list(self._handles.keys())
