"""
Configuration constants.

Centralizes the magic numbers used by the inventory action system.
Organized by functional area for easy maintenance.
"""

# =============================================================================
# INVENTORY LAYOUT
# =============================================================================

# Chest-style grids are always this many slots wide.
SLOTS_PER_ROW = 9

MIN_ROWS = 1
MAX_ROWS = 6
DEFAULT_ROWS = 3

DEFAULT_TITLE = "Inventory"

# =============================================================================
# TIMINGS
# =============================================================================

# Timing windows are named f"{ACTION_TIMING_PREFIX}.{kind}_ms".
ACTION_TIMING_PREFIX = "time.action"
ACTION_TIMING_WINDOW = 500
