"""
The explicit registry of inventory action descriptors.

Each ``ActionKind`` maps to a factory that builds its descriptor. The
descriptor is built on first lookup and then cached for the lifetime of the
registry, so every consumer holding the same registry shares one instance per
kind. Applications create one registry at start-up (usually with
``create_default_registry``) and pass it to whatever needs to dispatch
actions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from satchel.actions.base import InventoryAction, UnknownActionError
from satchel.actions.types import ActionKind
from satchel.actions.viewing import CloseAction, OpenAction, ReOpenAction

logger = logging.getLogger(__name__)

ActionFactory: TypeAlias = Callable[[], InventoryAction]


class ActionRegistry:
    """Maps action kinds to their lazily-built, shared descriptors."""

    def __init__(self) -> None:
        self._factories: dict[ActionKind, ActionFactory] = {}
        self._descriptors: dict[ActionKind, InventoryAction] = {}

    def register(self, kind: ActionKind, factory: ActionFactory) -> None:
        """Register the factory that builds the descriptor for ``kind``.

        Raises:
            ValueError: If ``kind`` is already registered.
        """
        if kind in self._factories:
            raise ValueError(f"Action '{kind.value}' already registered")
        self._factories[kind] = factory

    def lazy(self, kind: ActionKind) -> InventoryAction:
        """Return the shared descriptor for ``kind``, building it on first use.

        Construction is side-effect free, so two racing first lookups at worst
        build a spare descriptor; only the first one cached is ever returned.

        Raises:
            UnknownActionError: If no factory is registered for ``kind``.
        """
        descriptor = self._descriptors.get(kind)
        if descriptor is not None:
            return descriptor

        factory = self._factories.get(kind)
        if factory is None:
            raise UnknownActionError(kind)

        logger.debug("Creating descriptor for action %s", kind.value)
        return self._descriptors.setdefault(kind, factory())

    # Alias that reads better at call sites that are not about laziness.
    get = lazy

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories

    def kinds(self) -> list[ActionKind]:
        """Return the registered kinds in declaration order."""
        return [kind for kind in ActionKind if kind in self._factories]


def create_default_registry() -> ActionRegistry:
    """Build a registry containing every built-in inventory action."""
    registry = ActionRegistry()
    registry.register(ActionKind.OPEN, OpenAction)
    registry.register(ActionKind.CLOSE, CloseAction)
    registry.register(ActionKind.RE_OPEN, ReOpenAction)
    return registry
