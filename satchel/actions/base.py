"""
Base classes for the Descriptor/Executable inventory action system.

This module defines the two-phase object model used for every inventory
operation. The model separates *what* an operation is from *the one time it
is carried out*.

Core Components:
- InventoryAction: A stateless descriptor for one kind of operation (open,
  close, re-open). Exactly one instance per kind lives in an ActionRegistry
  and is shared by every caller. Its only job is to hand out executables.

- ExecutableAction: A short-lived, stateful object produced by a descriptor.
  It is bound to exactly one target inventory with ``with_target`` and then
  carries out the operation with ``perform``. Executables are confined to a
  single logical call and are not safe to share between threads.

- InventoryTarget: The protocol a live inventory must satisfy to be acted on.
  The target owns its own state and its own validation; the action system
  only delegates to it.

Typical flow::

    action = registry.lazy(ActionKind.RE_OPEN)
    action.as_executable().with_target(inventory).perform()

Callers must not perform two executables against the same target
concurrently; the action system does no locking of its own.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from satchel.actions.types import ActionKind


class ActionPreconditionError(Exception):
    """An action was used in a way its contract forbids.

    This always indicates a programming defect in the caller and is never
    retried.
    """


class UnboundTargetError(ActionPreconditionError):
    """``perform`` was called before a target was bound."""


class UnknownActionError(KeyError):
    """No descriptor is registered for the requested action kind."""


class InventoryTarget(Protocol):
    """An inventory view that actions can be performed against.

    Every method is fire-and-forget: the action system ignores return values
    and propagates any exception unchanged.
    """

    def open(self) -> None: ...

    def close(self) -> None: ...

    def re_open(self) -> None: ...


class ExecutableAction(abc.ABC):
    """A single-use, target-bound invocation of an inventory action.

    Executables start unbound. ``with_target`` binds (or rebinds, last call
    wins) the inventory to act on and returns the executable itself so the
    calls can be chained. ``perform`` then applies the operation to that
    inventory exactly once.
    """

    __slots__ = ("target",)

    def __init__(self) -> None:
        self.target: InventoryTarget | None = None

    @property
    def is_bound(self) -> bool:
        return self.target is not None

    def with_target(self, target: InventoryTarget) -> Self:
        """Bind this executable to ``target``, replacing any earlier binding.

        Raises:
            ActionPreconditionError: If ``target`` is None. Nothing is
                changed in that case.
        """
        if target is None:
            raise ActionPreconditionError("inventory")
        self.target = target
        return self

    def perform(self) -> None:
        """Apply the operation to the bound target.

        Raises:
            UnboundTargetError: If no target has been bound.
        """
        if self.target is None:
            raise UnboundTargetError("inventory")
        self._perform_on(self.target)

    @abc.abstractmethod
    def _perform_on(self, target: InventoryTarget) -> None:
        """Delegate to the target's matching operation."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(target={self.target!r})"


class InventoryAction(abc.ABC):
    """Stateless descriptor for one kind of inventory operation.

    Descriptors hold no per-invocation state, so a single instance is shared
    by all callers. Obtain instances from an ``ActionRegistry`` rather than
    constructing them ad hoc.
    """

    __slots__ = ()

    kind: ActionKind
    name: str

    @abc.abstractmethod
    def as_executable(self) -> ExecutableAction:
        """Return a brand-new, unbound executable for this operation."""
        pass

    def executable_for(self, target: InventoryTarget) -> ExecutableAction:
        """Return a new executable that is already bound to ``target``."""
        return self.as_executable().with_target(target)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind.value}>"
