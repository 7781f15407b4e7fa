"""Benchmark core and suites.

This package provides:
- the statistics reducer and the warmup/measure runner,
- synthetic timestamp batches and the timezone conversion workload,
- basic/advanced suites and their text/JSON rendering.
"""

from .memory import MemoryDelta, MemoryProbe, MemoryProbeError, MemorySnapshot, ProcessMemoryProbe
from .runner import BenchmarkResult, run_benchmark
from .stats import DescriptiveStats, InvalidSamplesError, calculate_stats

__all__ = [
    "BenchmarkResult",
    "DescriptiveStats",
    "InvalidSamplesError",
    "MemoryDelta",
    "MemoryProbe",
    "MemoryProbeError",
    "MemorySnapshot",
    "ProcessMemoryProbe",
    "calculate_stats",
    "run_benchmark",
]
