"""Process memory snapshots backed by psutil.

Field mapping (all whole megabytes):
- `rss`: resident set size
- `heap_used`: unique set size, memory that would be freed if the process exited
- `heap_total`: virtual memory size
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Protocol

import psutil

_BYTES_PER_MB = 1024 * 1024


class MemoryProbeError(RuntimeError):
    """Raised when process memory usage cannot be read."""


def to_megabytes(value: int) -> int:
    # half-megabytes round up
    return int(math.floor(value / _BYTES_PER_MB + 0.5))


@dataclass(frozen=True, slots=True)
class MemoryDelta:
    rss: int
    heap_used: int
    heap_total: int

    @classmethod
    def between(cls, before: "MemorySnapshot", after: "MemorySnapshot") -> "MemoryDelta":
        return cls(
            rss=after.rss - before.rss,
            heap_used=after.heap_used - before.heap_used,
            heap_total=after.heap_total - before.heap_total,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MemorySnapshot:
    rss: int
    heap_used: int
    heap_total: int

    def delta(self, before: "MemorySnapshot") -> MemoryDelta:
        """Returns `self - before` per field."""

        return MemoryDelta.between(before, self)

    def to_dict(self) -> dict:
        return asdict(self)


class MemoryProbe(Protocol):
    """Minimal interface for reading current process memory."""

    def snapshot(self) -> MemorySnapshot:
        """Returns the current memory usage."""


class ProcessMemoryProbe:
    """Reads memory usage of a process (the current one by default)."""

    def __init__(self, pid: int | None = None) -> None:
        try:
            self._process = psutil.Process(pid)
        except psutil.Error as exc:
            raise MemoryProbeError(f"cannot attach to process {pid}: {exc}") from exc

    def snapshot(self) -> MemorySnapshot:
        try:
            full = self._process.memory_full_info()
        except psutil.Error as exc:
            raise MemoryProbeError(f"cannot read memory usage: {exc}") from exc

        return MemorySnapshot(
            rss=to_megabytes(full.rss),
            heap_used=to_megabytes(full.uss),
            heap_total=to_megabytes(full.vms),
        )
