import pytest

from satchel.util.timings import (
    ActionTimings,
    TimingSpec,
    time_action,
    timing_registry,
)


def test_window_keeps_latest_durations_oldest_first() -> None:
    timings = ActionTimings("time.test_ms", window=3)
    for value in [100.0, 1.0, 2.0, 3.0]:
        timings.record(value)

    assert timings.count == 4
    assert timings.sample_count == 3
    assert timings.recent().tolist() == [1.0, 2.0, 3.0]
    assert timings.percentiles()[0] == pytest.approx(2.0)
    assert timings.slowest == pytest.approx(3.0)


def test_empty_window_reports_zeroes() -> None:
    timings = ActionTimings("time.test_ms", window=4)

    assert timings.percentiles() == (0.0, 0.0, 0.0)
    assert timings.slowest == 0.0
    assert timings.summary() == "time.test_ms: no actions"


def test_summary_lists_percentiles() -> None:
    timings = ActionTimings("time.test_ms", window=4)
    timings.record(4.0)

    assert timings.summary() == (
        "time.test_ms: n=1 p50=4.00 p95=4.00 p99=4.00 max=4.00"
    )


def test_register_and_record() -> None:
    timings = timing_registry.register("time.test_ms", window=10)
    timing_registry.record("time.test_ms", 4.0)

    assert timings.count == 1
    assert timings.window == 10


def test_duplicate_registration_raises() -> None:
    timing_registry.register("time.test_ms")

    with pytest.raises(ValueError, match="already registered"):
        timing_registry.register("time.test_ms")


def test_record_unknown_name_raises() -> None:
    with pytest.raises(KeyError):
        timing_registry.record("time.missing_ms", 1.0)


def test_register_all_sorted() -> None:
    timing_registry.register_all(
        [TimingSpec("b.timing", "second"), TimingSpec("a.timing", "first")]
    )

    assert [t.name for t in timing_registry.all()] == ["a.timing", "b.timing"]


def test_time_action_records_successful_block() -> None:
    timings = timing_registry.register("time.block_ms")

    with time_action("time.block_ms") as stopwatch:
        pass

    assert timings.count == 1
    assert stopwatch.elapsed_ms >= 0.0


def test_time_action_skips_failed_block() -> None:
    timings = timing_registry.register("time.block_ms")

    with pytest.raises(RuntimeError), time_action("time.block_ms"):
        raise RuntimeError("boom")

    assert timings.count == 0


def test_time_action_ignores_unregistered_name() -> None:
    with time_action("time.unknown_ms") as stopwatch:
        pass

    assert stopwatch.elapsed_ms >= 0.0
    assert timing_registry.all() == []


def test_time_action_as_decorator() -> None:
    timings = timing_registry.register("time.func_ms")

    @time_action("time.func_ms")
    def work() -> int:
        return 42

    assert work() == 42
    assert work() == 42
    assert timings.count == 2
