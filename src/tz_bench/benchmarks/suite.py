"""Basic and advanced benchmark suites.

The advanced suite benchmarks every configured timezone against every list
size, strictly one after another, pausing briefly between benchmarks so
transient system load can settle. The basic suite mirrors the simple
per-size average of the first version of the tool.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable

import structlog

from tz_bench.shared.config import BenchmarkConfig

from .conversion import make_workload
from .memory import MemoryProbe, ProcessMemoryProbe
from .runner import BenchmarkResult, run_benchmark
from .timestamps import generate_timestamps, repeated_timestamps


@dataclass(frozen=True, slots=True)
class SuiteEntry:
    timezone: str
    size: int
    result: BenchmarkResult

    def to_dict(self) -> dict:
        return {"timezone": self.timezone, "size": self.size, **self.result.to_dict()}


@dataclass(frozen=True, slots=True)
class BasicRow:
    size: int
    mean_ms: float
    per_item_ms: float


@dataclass(frozen=True, slots=True)
class SummaryRow:
    timezone: str
    mean_ms: float
    throughput: float


def ops_per_second(count: int, time_ms: float) -> float:
    if time_ms <= 0:
        return 0.0
    return (count / time_ms) * 1000.0


def run_advanced_suite(
    config: BenchmarkConfig,
    *,
    on_start: Callable[[str, int], None] | None = None,
    on_result: Callable[[SuiteEntry], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    memory_probe: MemoryProbe | None = None,
) -> list[SuiteEntry]:
    logger = structlog.get_logger(__name__)
    probe = memory_probe if memory_probe is not None else ProcessMemoryProbe()

    entries: list[SuiteEntry] = []
    for tz_name in config.timezones:
        workload = make_workload(tz_name, config.output_format)
        for size in config.list_sizes:
            logger.info("benchmark-started", timezone=tz_name, size=size)
            if on_start is not None:
                on_start(tz_name, size)
            batch = generate_timestamps(size)
            result = run_benchmark(
                workload,
                batch,
                warmup_runs=config.warmup_runs,
                iterations=config.iterations,
                memory_probe=probe,
            )
            entry = SuiteEntry(timezone=tz_name, size=size, result=result)
            entries.append(entry)
            if on_result is not None:
                on_result(entry)

            if config.inter_test_delay > 0:
                sleep(config.inter_test_delay)

    return entries


def run_basic_suite(
    timezone_name: str,
    config: BenchmarkConfig,
    *,
    on_start: Callable[[str, int], None] | None = None,
    memory_probe: MemoryProbe | None = None,
) -> list[BasicRow]:
    logger = structlog.get_logger(__name__)
    probe = memory_probe if memory_probe is not None else ProcessMemoryProbe()
    workload = make_workload(timezone_name, config.basic_output_format)

    rows: list[BasicRow] = []
    for size in config.basic_sizes:
        logger.info("basic-benchmark-started", timezone=timezone_name, size=size)
        if on_start is not None:
            on_start(timezone_name, size)
        result = run_benchmark(
            workload,
            repeated_timestamps(size),
            warmup_runs=0,
            iterations=config.iterations,
            memory_probe=probe,
        )
        mean = result.stats.mean
        rows.append(BasicRow(size=size, mean_ms=mean, per_item_ms=mean / size))
    return rows


def summarize(entries: Iterable[SuiteEntry]) -> dict[int, list[SummaryRow]]:
    """Groups results by list size (ascending), fastest timezone first."""

    summary: dict[int, list[SummaryRow]] = {}
    for entry in entries:
        mean = entry.result.stats.mean
        summary.setdefault(entry.size, []).append(
            SummaryRow(timezone=entry.timezone, mean_ms=mean, throughput=ops_per_second(entry.size, mean))
        )

    for rows in summary.values():
        rows.sort(key=lambda row: row.throughput, reverse=True)
    return dict(sorted(summary.items()))
