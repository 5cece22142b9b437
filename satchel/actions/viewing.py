"""Actions that change whether an inventory view is open.

Each operation is a descriptor/executable pair. Descriptors are stateless and
shared via the ActionRegistry; executables delegate to the matching method of
the bound inventory and leave validation to the inventory itself.
"""

from __future__ import annotations

from satchel.actions.base import ExecutableAction, InventoryAction, InventoryTarget
from satchel.actions.types import ActionKind


class OpenExecutable(ExecutableAction):
    """Opens the bound inventory view."""

    __slots__ = ()

    def _perform_on(self, target: InventoryTarget) -> None:
        target.open()


class OpenAction(InventoryAction):
    """Descriptor for opening an inventory view for its viewer."""

    __slots__ = ()

    kind = ActionKind.OPEN
    name = "Open"

    def as_executable(self) -> OpenExecutable:
        return OpenExecutable()


class CloseExecutable(ExecutableAction):
    """Closes the bound inventory view."""

    __slots__ = ()

    def _perform_on(self, target: InventoryTarget) -> None:
        target.close()


class CloseAction(InventoryAction):
    """Descriptor for closing an inventory view."""

    __slots__ = ()

    kind = ActionKind.CLOSE
    name = "Close"

    def as_executable(self) -> CloseExecutable:
        return CloseExecutable()


class ReOpenExecutable(ExecutableAction):
    """Re-opens the bound inventory view.

    Whether re-opening a closed view is allowed is up to the inventory; this
    executable only delegates.
    """

    __slots__ = ()

    def _perform_on(self, target: InventoryTarget) -> None:
        target.re_open()


class ReOpenAction(InventoryAction):
    """Descriptor for re-opening an inventory view.

    Re-opening re-asserts an already open view (for example after its
    contents or title changed) without a visible close/open cycle.
    """

    __slots__ = ()

    kind = ActionKind.RE_OPEN
    name = "Re-open"

    def as_executable(self) -> ReOpenExecutable:
        return ReOpenExecutable()
