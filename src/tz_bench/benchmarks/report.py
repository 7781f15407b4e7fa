"""Console and JSON rendering of benchmark results."""

from __future__ import annotations

import json
import platform
import sys
from datetime import datetime, timezone
from importlib import metadata
from typing import Iterable, Sequence

from tz_bench.shared.config import BenchmarkConfig

from .suite import BasicRow, SuiteEntry, ops_per_second, summarize

_WIDE = "=" * 80
_NARROW = "=" * 60
_RULE = "-" * 60


def format_time(ms: float) -> str:
    if ms < 1:
        return f"{ms * 1000:.2f} μs"
    if ms < 1000:
        return f"{ms:.2f} ms"
    return f"{ms / 1000:.2f} s"


def format_throughput(count: int, time_ms: float) -> str:
    per_second = ops_per_second(count, time_ms)
    if per_second >= 1_000_000:
        return f"{per_second / 1_000_000:.2f}M ops/sec"
    if per_second >= 1000:
        return f"{per_second / 1000:.2f}K ops/sec"
    return f"{per_second:.2f} ops/sec"


def _signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def _package_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "unknown"


def environment_info() -> dict[str, str]:
    return {
        "platform": f"{sys.platform} {platform.machine()}",
        "python": platform.python_version(),
        "tzdata": _package_version("tzdata"),
        "tz_bench": _package_version("tz-bench"),
    }


def render_header(config: BenchmarkConfig, environment: dict[str, str], *, now: datetime | None = None) -> list[str]:
    now = now or datetime.now()
    return [
        "",
        _WIDE,
        "🚀 Timezone Conversion Benchmark (Advanced Mode)",
        _WIDE,
        f"📅 Date: {now:%Y-%m-%d}",
        f"⏰ Time: {now:%H:%M:%S}",
        f"🖥️  Platform: {environment.get('platform', 'unknown')}",
        f"🐍 Python: {environment.get('python', 'unknown')}",
        f"🔧 tzdata: {environment.get('tzdata', 'unknown')}",
        f"🌍 Timezones: {len(config.timezones)}",
        f"📊 Iterations: {config.iterations}",
        f"🔥 Warmup Runs: {config.warmup_runs}",
        _WIDE,
        "",
    ]


def render_result(entry: SuiteEntry) -> list[str]:
    stats = entry.result.stats
    memory = entry.result.memory_delta

    lines = [
        f"📍 Timezone: {entry.timezone}",
        f"📏 List Size: {entry.size:,}",
        "⏱️  Performance:",
        f"   • Average: {format_time(stats.mean)}",
        f"   • Median: {format_time(stats.median)}",
        f"   • Min: {format_time(stats.min)}",
        f"   • Max: {format_time(stats.max)}",
        f"   • Std Dev: {format_time(stats.std_dev)}",
        f"   • 95th Percentile: {format_time(stats.p95)}",
        f"   • 99th Percentile: {format_time(stats.p99)}",
        f"   • Throughput: {format_throughput(entry.size, stats.mean)}",
    ]

    if memory.heap_used != 0:
        lines.extend(
            [
                "💾 Memory Usage:",
                f"   • Heap Used: {_signed(memory.heap_used)} MB",
                f"   • RSS: {_signed(memory.rss)} MB",
            ]
        )

    lines.append(_RULE)
    return lines


def render_summary(entries: Iterable[SuiteEntry]) -> list[str]:
    lines = ["", "📊 SUMMARY", _NARROW]

    for size, rows in summarize(entries).items():
        lines.append("")
        lines.append(f"📏 List Size: {size:,}")
        for row in rows:
            lines.append(
                f"   {row.timezone:<20} | {format_time(row.mean_ms):<10} | {format_throughput(size, row.mean_ms)}"
            )

    lines.extend(
        [
            "",
            _NARROW,
            "✨ Advanced benchmark completed successfully!",
            "💡 Tip: Run multiple times to get more accurate results",
            _NARROW,
            "",
        ]
    )
    return lines


def render_basic(timezone_name: str, rows: Sequence[BasicRow]) -> list[str]:
    lines = ["", f"🔄 Running Basic Benchmark for {timezone_name}...", ""]
    for row in rows:
        lines.append(
            f"List Size: {row.size} | Avg Time: {row.mean_ms:.2f} ms | Per-Item: {row.per_item_ms:.2f} ms"
        )
    lines.extend(["", "✅ Basic benchmark completed!", ""])
    return lines


def build_json_report(
    config: BenchmarkConfig,
    entries: Sequence[SuiteEntry],
    *,
    environment: dict[str, str] | None = None,
) -> dict:
    return {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "environment": environment if environment is not None else environment_info(),
        "config": {
            "iterations": config.iterations,
            "warmup_runs": config.warmup_runs,
            "list_sizes": list(config.list_sizes),
            "timezones": list(config.timezones),
            "output_format": config.output_format,
        },
        "results": [entry.to_dict() for entry in entries],
        "summary": {
            str(size): [
                {"timezone": row.timezone, "mean_ms": row.mean_ms, "throughput": row.throughput}
                for row in rows
            ]
            for size, rows in summarize(entries).items()
        },
    }


def to_json(payload: dict) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)
