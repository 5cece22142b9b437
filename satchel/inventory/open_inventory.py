"""An inventory view opened for a single viewer.

``OpenInventory`` is the live object that inventory actions are performed
against. It only tracks whether the view is open and how often it has been
(re)opened; the slot contents and how they are drawn belong to whatever
owns the inventory.

The owner is responsible for serializing mutations: at most one action may be
in flight against a given inventory at a time.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from satchel import config
from satchel.events import (
    InventoryClosedEvent,
    InventoryOpenedEvent,
    InventoryReopenedEvent,
    publish_event,
)
from satchel.types import Revision, RowCount, ViewerId

logger = logging.getLogger(__name__)


class InventoryState(Enum):
    """Whether an inventory view is currently shown to its viewer."""

    CLOSED = auto()
    OPEN = auto()


class OpenInventory:
    """A chest-style inventory view shown to one viewer.

    Transitions:
        open:    CLOSED -> OPEN (no-op when already open)
        close:   OPEN -> CLOSED (no-op when already closed)
        re_open: OPEN -> OPEN, refreshing the view; from CLOSED it acts as a
                 first open
    """

    def __init__(
        self,
        viewer: ViewerId,
        title: str = config.DEFAULT_TITLE,
        rows: RowCount = config.DEFAULT_ROWS,
    ) -> None:
        """Create a closed inventory view.

        Args:
            viewer: Who the view is shown to
            title: Title shown above the slot grid
            rows: Number of slot rows, between MIN_ROWS and MAX_ROWS

        Raises:
            ValueError: If ``rows`` is out of range.
        """
        if not config.MIN_ROWS <= rows <= config.MAX_ROWS:
            raise ValueError(
                f"rows must be between {config.MIN_ROWS} and {config.MAX_ROWS}, "
                f"got {rows}"
            )
        self.viewer = viewer
        self.title = title
        self.rows = rows
        self.state = InventoryState.CLOSED
        self.revision = Revision(0)

        self.open_count = 0
        self.close_count = 0
        self.reopen_count = 0

    @property
    def slot_count(self) -> int:
        return self.rows * config.SLOTS_PER_ROW

    @property
    def is_open(self) -> bool:
        return self.state is InventoryState.OPEN

    def open(self) -> None:
        if self.is_open:
            logger.debug("%r is already open", self)
            return
        self._show()
        self.open_count += 1
        publish_event(
            InventoryOpenedEvent(
                inventory=self, viewer=self.viewer, revision=self.revision
            )
        )

    def close(self) -> None:
        if not self.is_open:
            logger.debug("%r is already closed", self)
            return
        self.state = InventoryState.CLOSED
        self.close_count += 1
        logger.debug("Closed %r", self)
        publish_event(InventoryClosedEvent(inventory=self, viewer=self.viewer))

    def re_open(self) -> None:
        """Show the view again with a fresh revision."""
        was_open = self.is_open
        self._show()
        self.reopen_count += 1
        publish_event(
            InventoryReopenedEvent(
                inventory=self,
                viewer=self.viewer,
                revision=self.revision,
                was_open=was_open,
            )
        )

    def _show(self) -> None:
        self.state = InventoryState.OPEN
        self.revision = Revision(self.revision + 1)
        logger.debug("Showing %r", self)

    def __repr__(self) -> str:
        return (
            f"OpenInventory(viewer={self.viewer}, title={self.title!r}, "
            f"state={self.state.name}, revision={self.revision})"
        )
