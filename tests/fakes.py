"""Deterministic stand-ins for the clock and memory collaborators.

Runner tests use these instead of `time.perf_counter` and psutil so that
every sample and memory delta is known in advance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from tz_bench.benchmarks.memory import MemorySnapshot


class StepClock:
    """Clock whose successive readings come from a fixed list (seconds)."""

    def __init__(self, readings: Iterable[float]) -> None:
        self._readings = list(readings)
        self.calls = 0

    def __call__(self) -> float:
        value = self._readings[self.calls]
        self.calls += 1
        return value


@dataclass
class ScriptedMemoryProbe:
    """Returns the given snapshots in order."""

    snapshots: list[MemorySnapshot]
    calls: int = 0

    def snapshot(self) -> MemorySnapshot:
        value = self.snapshots[self.calls]
        self.calls += 1
        return value


@dataclass
class ConstantMemoryProbe:
    """Always reports the same usage; counts calls."""

    value: MemorySnapshot = field(default_factory=lambda: MemorySnapshot(rss=100, heap_used=50, heap_total=200))
    calls: int = 0

    def snapshot(self) -> MemorySnapshot:
        self.calls += 1
        return self.value


class RecordingWorkload:
    """Records every call; optionally raises on a given call number (1-based)."""

    def __init__(self, *, fail_on_call: int | None = None, error: Exception | None = None) -> None:
        self.calls = 0
        self.batches: list[object] = []
        self._fail_on_call = fail_on_call
        self._error = error or RuntimeError("workload failed")

    def __call__(self, batch):  # type: ignore[no-untyped-def]
        self.calls += 1
        self.batches.append(batch)
        if self._fail_on_call is not None and self.calls == self._fail_on_call:
            raise self._error
        return len(batch)
