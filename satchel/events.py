"""Global event system for decoupling inventory notifications from dispatch.

This event bus is designed for notifications only. It uses a global instance
for simplicity so that inventories and the action router do not need a
reference to whoever is listening.

USE FOR:
- Telling viewers that an inventory view was opened, refreshed or closed
- Audit trails of dispatched actions
- Cross-system notifications (sound cues, UI redraws)

DO NOT USE FOR:
- The actions themselves (use the ActionRouter or an executable directly)
- Operations that need immediate return values or synchronous confirmation
- Error handling or exception propagation

The event bus is fire-and-forget: publish an event without expecting return
values. All handlers execute immediately (synchronously). A failing handler is
logged and never interrupts the publisher.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from satchel.types import ElapsedMs, Revision, ViewerId

logger = logging.getLogger(__name__)


@dataclass
class InventoryEvent:
    """Base class for all inventory events."""

    pass


@dataclass
class InventoryOpenedEvent(InventoryEvent):
    """An inventory view went from closed to open."""

    inventory: Any  # Avoid circular imports
    viewer: ViewerId
    revision: Revision


@dataclass
class InventoryReopenedEvent(InventoryEvent):
    """An inventory view was re-opened.

    Attributes:
        inventory: The re-opened inventory.
        viewer: Who the view belongs to.
        revision: The new view revision.
        was_open: False when the re-open started from a closed view.
    """

    inventory: Any
    viewer: ViewerId
    revision: Revision
    was_open: bool


@dataclass
class InventoryClosedEvent(InventoryEvent):
    """An inventory view went from open to closed."""

    inventory: Any
    viewer: ViewerId


@dataclass
class InventoryActionPerformedEvent(InventoryEvent):
    """Fired by the ActionRouter after an action completed without raising."""

    kind: Any  # ActionKind; avoid circular imports
    inventory: Any
    elapsed_ms: ElapsedMs


EventHandler: TypeAlias = Callable[[InventoryEvent], object]


class EventBus:
    """Synchronous publish/subscribe keyed on the exact event class."""

    def __init__(self) -> None:
        self._handlers: defaultdict[type, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: EventHandler) -> None:
        """Remove ``handler``; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, event: InventoryEvent) -> None:
        """Notify every handler subscribed to ``type(event)``, in order."""
        event_name = type(event).__name__
        # Snapshot so handlers may (un)subscribe while being notified.
        for handler in tuple(self._handlers.get(type(event), ())):
            try:
                handler(event)
            except Exception:
                logger.exception(f"{event_name} handler {handler!r} failed")


_bus = EventBus()


def subscribe_to_event(event_type: type, handler: EventHandler) -> None:
    _bus.subscribe(event_type, handler)


def unsubscribe_from_event(event_type: type, handler: EventHandler) -> None:
    _bus.unsubscribe(event_type, handler)


def publish_event(event: InventoryEvent) -> None:
    _bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Swap in an empty global bus. Use only in tests."""
    global _bus
    _bus = EventBus()
