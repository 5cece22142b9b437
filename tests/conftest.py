from __future__ import annotations

from collections.abc import Iterator

import pytest

from satchel.events import reset_event_bus_for_testing
from satchel.util.timings import timing_registry


@pytest.fixture(autouse=True)
def clear_timing_registry() -> Iterator[None]:
    """Clear the global timing registry before and after each test."""
    timing_registry.clear()
    yield
    timing_registry.clear()


@pytest.fixture(autouse=True)
def fresh_event_bus() -> Iterator[None]:
    """Give every test its own global event bus."""
    reset_event_bus_for_testing()
    yield
    reset_event_bus_for_testing()
