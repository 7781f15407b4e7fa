"""Konfiguracja benchmarku.

Built once at startup and passed explicitly to the suite layer. The
benchmark core (runner, reducer) never reads it.

Environment overrides:
- `TZBENCH_ITERATIONS`: measured iterations per benchmark
- `TZBENCH_WARMUP_RUNS`: unmeasured warmup iterations
- `TZBENCH_LIST_SIZES`: comma-separated batch sizes (advanced mode)
- `TZBENCH_TIMEZONES`: comma-separated IANA names (advanced mode)
- `TZBENCH_DELAY`: pause between advanced benchmarks, in seconds
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

DEFAULT_TIMEZONES: tuple[str, ...] = (
    "Asia/Kolkata",
    "America/New_York",
    "Europe/London",
    "Asia/Tokyo",
    "Australia/Sydney",
    "UTC",
)


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Ustawienia pojedynczego uruchomienia benchmarku."""

    list_sizes: tuple[int, ...] = (10, 100, 1000, 10000)
    basic_sizes: tuple[int, ...] = (10, 100, 1000)
    iterations: int = 30
    warmup_runs: int = 5
    timezones: tuple[str, ...] = DEFAULT_TIMEZONES
    output_format: str = "%Y-%m-%d %H:%M:%S %z"
    basic_output_format: str = "%Y-%m-%d %H:%M"
    inter_test_delay: float = 0.1

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.warmup_runs < 0:
            raise ValueError(f"warmup_runs must be >= 0, got {self.warmup_runs}")
        if self.inter_test_delay < 0:
            raise ValueError(f"inter_test_delay must be >= 0, got {self.inter_test_delay}")
        for size in (*self.list_sizes, *self.basic_sizes):
            if size < 1:
                raise ValueError(f"list sizes must be >= 1, got {size}")
        if not self.timezones:
            raise ValueError("at least one timezone is required")

    @classmethod
    def default(cls) -> "BenchmarkConfig":
        """Tworzy domyślną konfigurację."""

        return cls()

    def with_overrides(self, **changes: object) -> "BenchmarkConfig":
        """Returns a copy with the given non-None fields replaced."""

        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def _parse_float(key: str, raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_config(environ: Mapping[str, str] | None = None) -> BenchmarkConfig:
    """Builds the configuration from defaults plus `TZBENCH_*` variables.

    Unset or blank variables keep the default. Malformed values raise
    `ValueError`.
    """

    env = os.environ if environ is None else environ
    changes: dict[str, object] = {}

    raw = (env.get("TZBENCH_ITERATIONS") or "").strip()
    if raw:
        changes["iterations"] = _parse_int("TZBENCH_ITERATIONS", raw)

    raw = (env.get("TZBENCH_WARMUP_RUNS") or "").strip()
    if raw:
        changes["warmup_runs"] = _parse_int("TZBENCH_WARMUP_RUNS", raw)

    raw = (env.get("TZBENCH_LIST_SIZES") or "").strip()
    if raw:
        changes["list_sizes"] = tuple(_parse_int("TZBENCH_LIST_SIZES", item) for item in _split_list(raw))

    raw = (env.get("TZBENCH_TIMEZONES") or "").strip()
    if raw:
        changes["timezones"] = tuple(_split_list(raw))

    raw = (env.get("TZBENCH_DELAY") or "").strip()
    if raw:
        changes["inter_test_delay"] = _parse_float("TZBENCH_DELAY", raw)

    return BenchmarkConfig.default().with_overrides(**changes)
