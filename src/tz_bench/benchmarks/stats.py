"""Descriptive statistics over per-iteration timing samples."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Iterable


class InvalidSamplesError(ValueError):
    """Raised when statistics are requested for an empty sample sequence."""


@dataclass(frozen=True, slots=True)
class DescriptiveStats:
    count: int
    mean: float
    min: float
    max: float
    median: float
    std_dev: float
    p95: float
    p99: float

    def to_dict(self) -> dict:
        return asdict(self)


def _rank(count: int, fraction: float) -> int:
    return min(max(int(math.floor(count * fraction)), 0), count - 1)


def calculate_stats(samples: Iterable[float]) -> DescriptiveStats:
    """Reduces samples to count, mean, min/max, median, std dev, p95 and p99.

    Variance is the population variance (divisor n). The median is the
    element at rank floor(n / 2) of the sorted samples, so for even n it is
    the upper of the two middle values. Percentile ranks are clamped to the
    last element. The input is copied before sorting and left untouched.
    """

    ordered = sorted(float(s) for s in samples)
    count = len(ordered)
    if count == 0:
        raise InvalidSamplesError("cannot compute statistics of an empty sample sequence")

    total = 0.0
    for value in ordered:
        total += value
    mean = total / count

    variance = sum((value - mean) ** 2 for value in ordered) / count

    return DescriptiveStats(
        count=count,
        mean=mean,
        min=ordered[0],
        max=ordered[-1],
        median=ordered[_rank(count, 0.5)],
        std_dev=math.sqrt(variance),
        p95=ordered[_rank(count, 0.95)],
        p99=ordered[_rank(count, 0.99)],
    )
