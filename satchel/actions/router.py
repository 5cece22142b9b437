"""
The central dispatcher for inventory actions.

This module contains the ActionRouter, the single convenience entry point for
performing an action by kind. It runs the descriptor/executable protocol and
wraps it with logging, timings and notification events.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satchel import config
from satchel.events import InventoryActionPerformedEvent, publish_event
from satchel.util.timings import TimingSpec, time_action, timing_registry

if TYPE_CHECKING:
    from satchel.actions.base import InventoryTarget
    from satchel.actions.registry import ActionRegistry
    from satchel.actions.types import ActionKind

logger = logging.getLogger(__name__)


def action_timing_name(kind: ActionKind) -> str:
    """Return the timing window name used for ``kind``."""
    return f"{config.ACTION_TIMING_PREFIX}.{kind.value}_ms"


class ActionRouter:
    """
    Dispatches inventory actions by kind.

    For every call to ``perform`` the router looks up the shared descriptor
    in its registry, creates a fresh executable, binds it to the inventory and
    performs it. The executable is dropped afterwards, so the router never
    keeps an inventory alive.

    Errors are never swallowed: precondition failures and exceptions raised
    by the inventory are logged and re-raised unchanged. Failed actions leave
    no timing sample and publish no event.
    """

    def __init__(self, registry: ActionRegistry) -> None:
        self.registry = registry

    def register_timings(self) -> None:
        """Register a timing window for every kind in the registry."""
        timing_registry.register_all(
            [
                TimingSpec(
                    action_timing_name(kind),
                    f"Wall-clock time of {kind.value} actions",
                    config.ACTION_TIMING_WINDOW,
                )
                for kind in self.registry.kinds()
                if not timing_registry.is_registered(action_timing_name(kind))
            ]
        )

    def perform(self, kind: ActionKind, inventory: InventoryTarget) -> None:
        """The single public entry point for performing an action by kind.

        Raises:
            UnknownActionError: If ``kind`` is not registered.
            ActionPreconditionError: If ``inventory`` is None.
            Exception: Anything the inventory itself raises, unchanged.
        """
        action = self.registry.lazy(kind)
        logger.debug("%s: %r", action.name, inventory)

        try:
            with time_action(action_timing_name(kind)) as stopwatch:
                action.executable_for(inventory).perform()
        except Exception:
            logger.exception(f"{action.name} failed on {inventory!r}")
            raise

        publish_event(
            InventoryActionPerformedEvent(
                kind=kind, inventory=inventory, elapsed_ms=stopwatch.elapsed_ms
            )
        )
