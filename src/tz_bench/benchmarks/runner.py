"""Warmup + measured execution of a workload over one input batch."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Sequence, TypeVar

import structlog

from .memory import MemoryDelta, MemoryProbe, ProcessMemoryProbe
from .stats import DescriptiveStats, calculate_stats

BatchT = TypeVar("BatchT", bound=Sequence[Any])

Clock = Callable[[], float]
"""Monotonic clock returning seconds."""


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    stats: DescriptiveStats
    memory_delta: MemoryDelta
    samples: tuple[float, ...] = ()

    def to_dict(self) -> dict:
        return {
            "stats": self.stats.to_dict(),
            "memory_delta": self.memory_delta.to_dict(),
            "samples_ms": list(self.samples),
        }


def run_benchmark(
    workload: Callable[[BatchT], Any],
    batch: BatchT,
    *,
    warmup_runs: int,
    iterations: int,
    clock: Clock | None = None,
    memory_probe: MemoryProbe | None = None,
) -> BenchmarkResult:
    """Runs `workload(batch)` warmup_runs times, then times it iterations times.

    Samples are elapsed milliseconds, one per measured iteration, in execution
    order. Exceptions raised by the workload (in either phase) propagate to
    the caller; there is no partial result.
    """

    if warmup_runs < 0:
        raise ValueError(f"warmup_runs must be >= 0, got {warmup_runs}")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    logger = structlog.get_logger(__name__)
    clock = clock or time.perf_counter
    probe = memory_probe if memory_probe is not None else ProcessMemoryProbe()

    before = probe.snapshot()

    for _ in range(warmup_runs):
        workload(batch)

    samples: list[float] = []
    for _ in range(iterations):
        start = clock()
        workload(batch)
        end = clock()
        samples.append((end - start) * 1000.0)

    after = probe.snapshot()

    stats = calculate_stats(samples)
    delta = after.delta(before)

    logger.debug(
        "benchmark-finished",
        batch_size=len(batch),
        warmup_runs=warmup_runs,
        iterations=iterations,
        mean_ms=stats.mean,
        rss_delta_mb=delta.rss,
    )
    return BenchmarkResult(stats=stats, memory_delta=delta, samples=tuple(samples))
