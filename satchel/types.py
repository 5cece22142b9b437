from __future__ import annotations

from typing import NewType, TypeAlias

# =============================================================================
# IDENTIFIERS
# =============================================================================

# Opaque identifier of whoever is looking at an open inventory (a player,
# a spectator session, a test harness).
ViewerId = NewType("ViewerId", int)

# Monotonic counter bumped whenever an inventory view is (re)opened. Clients
# compare revisions to discard stale view updates.
Revision = NewType("Revision", int)

# =============================================================================
# LAYOUT TYPES
# =============================================================================

RowCount: TypeAlias = int  # Example: 3 = a small chest

# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Wall-clock duration of a single dispatched action, in milliseconds.
ElapsedMs = NewType("ElapsedMs", float)
