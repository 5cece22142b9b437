"""Wall-clock timings of dispatched inventory actions.

Each action kind gets a named ``ActionTimings`` window holding its most
recent durations. The ``ActionRouter`` feeds the windows through
``time_action``; a debug overlay or admin command reads them back as
percentiles.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import NamedTuple

import numpy as np

from satchel.types import ElapsedMs


class ActionTimings:
    """Ring buffer of the most recent action durations, in milliseconds."""

    def __init__(self, name: str, description: str = "", window: int = 1000) -> None:
        self.name = name
        self.description = description
        self._durations = np.zeros(window, dtype=np.float32)
        self._next = 0
        # All-time number of recorded actions, not capped by the window.
        self.count = 0

    @property
    def window(self) -> int:
        return len(self._durations)

    @property
    def sample_count(self) -> int:
        return min(self.count, self.window)

    def record(self, elapsed_ms: float) -> None:
        self._durations[self._next] = elapsed_ms
        self._next = (self._next + 1) % self.window
        self.count += 1

    def recent(self) -> np.ndarray:
        """Return the durations still in the window, oldest first."""
        if self.count <= self.window:
            return self._durations[: self.count]
        return np.roll(self._durations, -self._next)

    def percentiles(self) -> tuple[float, float, float]:
        """Return (p50, p95, p99) of the window, or zeroes when empty."""
        recent = self.recent()
        if recent.size == 0:
            return (0.0, 0.0, 0.0)
        p50, p95, p99 = np.percentile(recent, [50, 95, 99])
        return (float(p50), float(p95), float(p99))

    @property
    def slowest(self) -> float:
        recent = self.recent()
        return float(recent.max()) if recent.size else 0.0

    def summary(self) -> str:
        if self.count == 0:
            return f"{self.name}: no actions"
        p50, p95, p99 = self.percentiles()
        return (
            f"{self.name}: n={self.count} p50={p50:.2f} p95={p95:.2f} "
            f"p99={p99:.2f} max={self.slowest:.2f}"
        )


class TimingSpec(NamedTuple):
    """Definition for a timing window to register in batch."""

    name: str
    description: str
    window: int = 100


class TimingRegistry:
    """Named ``ActionTimings`` windows."""

    def __init__(self) -> None:
        self._timings: dict[str, ActionTimings] = {}

    def register(
        self, name: str, description: str = "", window: int = 1000
    ) -> ActionTimings:
        """Register a timing window and return it.

        Raises:
            ValueError: If a window with the same name already exists.
        """
        if name in self._timings:
            raise ValueError(f"Timing '{name}' already registered")
        timings = ActionTimings(name, description, window)
        self._timings[name] = timings
        return timings

    def register_all(self, specs: Sequence[TimingSpec]) -> None:
        for spec in specs:
            self.register(spec.name, spec.description, spec.window)

    def get(self, name: str) -> ActionTimings | None:
        return self._timings.get(name)

    def is_registered(self, name: str) -> bool:
        return name in self._timings

    def all(self) -> list[ActionTimings]:
        """Return all windows sorted by name."""
        return sorted(self._timings.values(), key=lambda t: t.name)

    def record(self, name: str, elapsed_ms: float) -> None:
        """Record one duration.

        Raises:
            KeyError: If ``name`` is not registered.
        """
        timings = self.get(name)
        if timings is None:
            raise KeyError(f"Timing '{name}' is not registered")
        timings.record(elapsed_ms)

    def clear(self) -> None:
        self._timings.clear()


# Global registry instance used throughout the application
timing_registry = TimingRegistry()


@dataclass
class Stopwatch:
    """Result handle yielded by ``time_action``; filled in on success."""

    elapsed_ms: ElapsedMs = ElapsedMs(0.0)


@contextmanager
def time_action(name: str) -> Iterator[Stopwatch]:
    """Time the block and record it to the named window.

    Nothing is recorded when the block raises, or when no window called
    ``name`` is registered. Works as a decorator too.
    """
    stopwatch = Stopwatch()
    start = perf_counter()
    yield stopwatch
    stopwatch.elapsed_ms = ElapsedMs((perf_counter() - start) * 1000)
    if timing_registry.is_registered(name):
        timing_registry.record(name, stopwatch.elapsed_ms)
