from .base import (
    ActionPreconditionError,
    ExecutableAction,
    InventoryAction,
    InventoryTarget,
    UnboundTargetError,
    UnknownActionError,
)
from .registry import ActionRegistry, create_default_registry
from .router import ActionRouter
from .types import ActionKind
from .viewing import (
    CloseAction,
    CloseExecutable,
    OpenAction,
    OpenExecutable,
    ReOpenAction,
    ReOpenExecutable,
)

__all__ = [
    "ActionKind",
    "ActionPreconditionError",
    "ActionRegistry",
    "ActionRouter",
    "CloseAction",
    "CloseExecutable",
    "ExecutableAction",
    "InventoryAction",
    "InventoryTarget",
    "OpenAction",
    "OpenExecutable",
    "ReOpenAction",
    "ReOpenExecutable",
    "UnboundTargetError",
    "UnknownActionError",
    "create_default_registry",
]
