"""Action kinds understood by the inventory action system."""

from __future__ import annotations

from enum import Enum


class ActionKind(Enum):
    """Every operation that can be dispatched against an open inventory.

    The value doubles as the stable name used in timing window names.
    Adding an operation means adding a member here, a descriptor/executable
    pair, and a factory entry in ``create_default_registry``.
    """

    OPEN = "open"
    CLOSE = "close"
    RE_OPEN = "re_open"
