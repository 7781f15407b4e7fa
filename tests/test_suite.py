"""Tests for the basic and advanced benchmark suites."""

from __future__ import annotations

import pytest

from tests.fakes import ConstantMemoryProbe
from tz_bench.benchmarks.conversion import UnknownTimezoneError
from tz_bench.benchmarks.memory import MemoryDelta
from tz_bench.benchmarks.runner import BenchmarkResult
from tz_bench.benchmarks.stats import calculate_stats
from tz_bench.benchmarks.suite import (
    SuiteEntry,
    ops_per_second,
    run_advanced_suite,
    run_basic_suite,
    summarize,
)
from tz_bench.shared.config import BenchmarkConfig


def _small_config(**changes: object) -> BenchmarkConfig:
    base = BenchmarkConfig(
        list_sizes=(3, 7),
        basic_sizes=(2, 4),
        iterations=2,
        warmup_runs=1,
        timezones=("UTC", "Asia/Tokyo"),
        inter_test_delay=0.05,
    )
    return base.with_overrides(**changes)


def _entry(timezone: str, size: int, samples: list[float]) -> SuiteEntry:
    result = BenchmarkResult(
        stats=calculate_stats(samples),
        memory_delta=MemoryDelta(rss=0, heap_used=0, heap_total=0),
        samples=tuple(samples),
    )
    return SuiteEntry(timezone=timezone, size=size, result=result)


def test_advanced_suite_covers_every_timezone_and_size_in_order() -> None:
    delays: list[float] = []
    seen: list[tuple[str, int]] = []

    entries = run_advanced_suite(
        _small_config(),
        on_result=lambda entry: seen.append((entry.timezone, entry.size)),
        sleep=delays.append,
        memory_probe=ConstantMemoryProbe(),
    )

    expected = [("UTC", 3), ("UTC", 7), ("Asia/Tokyo", 3), ("Asia/Tokyo", 7)]
    assert [(e.timezone, e.size) for e in entries] == expected
    assert seen == expected
    assert delays == [0.05] * 4
    assert all(e.result.stats.count == 2 for e in entries)


def test_advanced_suite_skips_sleep_when_delay_is_zero() -> None:
    delays: list[float] = []

    run_advanced_suite(
        _small_config(inter_test_delay=0.0, timezones=("UTC",), list_sizes=(1,)),
        sleep=delays.append,
        memory_probe=ConstantMemoryProbe(),
    )

    assert delays == []


def test_advanced_suite_rejects_unknown_timezone() -> None:
    with pytest.raises(UnknownTimezoneError):
        run_advanced_suite(
            _small_config(timezones=("Nowhere/Land",)),
            sleep=lambda _s: None,
            memory_probe=ConstantMemoryProbe(),
        )


def test_basic_suite_reports_mean_and_per_item() -> None:
    probe = ConstantMemoryProbe()

    rows = run_basic_suite("Asia/Kolkata", _small_config(), memory_probe=probe)

    assert [row.size for row in rows] == [2, 4]
    for row in rows:
        assert row.mean_ms >= 0
        assert row.per_item_ms == pytest.approx(row.mean_ms / row.size)
    assert probe.calls == 4


def test_ops_per_second() -> None:
    assert ops_per_second(100, 10.0) == pytest.approx(10_000.0)
    assert ops_per_second(100, 0.0) == 0.0


def test_summarize_groups_by_size_and_sorts_by_throughput() -> None:
    entries = [
        _entry("UTC", 10, [2.0]),
        _entry("Asia/Tokyo", 10, [1.0]),
        _entry("UTC", 100, [5.0]),
        _entry("Asia/Tokyo", 100, [8.0]),
    ]

    summary = summarize(entries)

    assert list(summary) == [10, 100]
    assert [row.timezone for row in summary[10]] == ["Asia/Tokyo", "UTC"]
    assert [row.timezone for row in summary[100]] == ["UTC", "Asia/Tokyo"]
    assert summary[10][0].throughput == pytest.approx(10_000.0)


def test_summarize_lists_sizes_ascending_regardless_of_run_order() -> None:
    entries = [
        _entry("UTC", 100, [5.0]),
        _entry("UTC", 10, [1.0]),
        _entry("Asia/Tokyo", 100, [4.0]),
        _entry("Asia/Tokyo", 10, [2.0]),
    ]

    assert list(summarize(entries)) == [10, 100]


def test_advanced_suite_with_descending_sizes_summarizes_ascending() -> None:
    entries = run_advanced_suite(
        _small_config(list_sizes=(7, 3)),
        sleep=lambda _s: None,
        memory_probe=ConstantMemoryProbe(),
    )

    assert [e.size for e in entries] == [7, 3, 7, 3]
    assert list(summarize(entries)) == [3, 7]


def test_suites_announce_each_benchmark_before_running_it() -> None:
    started: list[tuple[str, int]] = []

    run_advanced_suite(
        _small_config(),
        on_start=lambda tz, size: started.append((tz, size)),
        sleep=lambda _s: None,
        memory_probe=ConstantMemoryProbe(),
    )
    run_basic_suite(
        "UTC",
        _small_config(),
        on_start=lambda tz, size: started.append((tz, size)),
        memory_probe=ConstantMemoryProbe(),
    )

    assert started == [
        ("UTC", 3),
        ("UTC", 7),
        ("Asia/Tokyo", 3),
        ("Asia/Tokyo", 7),
        ("UTC", 2),
        ("UTC", 4),
    ]
