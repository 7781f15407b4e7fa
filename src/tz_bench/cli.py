"""CLI entrypoint for running the timezone conversion benchmark."""

from __future__ import annotations

import signal
import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from dataclasses import dataclass
from typing import Iterable

import structlog

from tz_bench.benchmarks.conversion import UnknownTimezoneError, resolve_timezone
from tz_bench.benchmarks.report import (
    build_json_report,
    environment_info,
    render_basic,
    render_header,
    render_result,
    render_summary,
    to_json,
)
from tz_bench.benchmarks.suite import run_advanced_suite, run_basic_suite
from tz_bench.shared import BenchmarkConfig, configure_logging, load_config, write_error_report

_EPILOG = """\
Examples:
  tz-bench                    # Run advanced benchmark
  tz-bench --basic            # Run basic benchmark
  tz-bench -b -t UTC          # Basic benchmark with UTC timezone
  tz-bench --advanced         # Explicitly run advanced benchmark

Basic mode: per-size average and per-item time for one timezone.
Advanced mode: full statistics, multiple timezones, memory tracking.
"""


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="tz-bench",
        description="Benchmark converting UTC timestamps into IANA timezones.",
        epilog=_EPILOG,
        formatter_class=RawDescriptionHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-b",
        "--basic",
        dest="mode",
        action="store_const",
        const="basic",
        help="Run basic benchmark (simple output)",
    )
    mode.add_argument(
        "-a",
        "--advanced",
        dest="mode",
        action="store_const",
        const="advanced",
        help="Run advanced benchmark (detailed output) [default]",
    )
    parser.set_defaults(mode="advanced")
    parser.add_argument(
        "-t",
        "--timezone",
        default="Asia/Kolkata",
        help="Timezone for basic mode (default: Asia/Kolkata)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Advanced mode output format (default: text)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        help="Measured iterations per benchmark (default: 30)",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        help="Warmup iterations per advanced benchmark (default: 5)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


class BenchmarkTerminated(KeyboardInterrupt):
    """Raised from the SIGTERM handler to stop the run."""


@dataclass(slots=True)
class _Progress:
    """Timezone and list size of the benchmark currently running."""

    timezone: str | None = None
    size: int | None = None
    completed: int = 0

    def mark(self, timezone: str, size: int) -> None:
        if self.timezone is not None:
            self.completed += 1
        self.timezone = timezone
        self.size = size

    def as_context(self) -> dict[str, object]:
        if self.timezone is None:
            return {}
        return {"timezone": self.timezone, "size": self.size, "completed_benchmarks": self.completed}


def _emit(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def _run_basic(args: Namespace, config: BenchmarkConfig, progress: _Progress) -> int:
    resolve_timezone(args.timezone)
    rows = run_basic_suite(args.timezone, config, on_start=progress.mark)
    _emit(render_basic(args.timezone, rows))
    return 0


def _run_advanced(args: Namespace, config: BenchmarkConfig, progress: _Progress) -> int:
    for name in config.timezones:
        resolve_timezone(name)

    if args.format == "json":
        entries = run_advanced_suite(config, on_start=progress.mark)
        print(to_json(build_json_report(config, entries)))
        return 0

    _emit(render_header(config, environment_info()))
    entries = run_advanced_suite(
        config,
        on_start=progress.mark,
        on_result=lambda entry: _emit(render_result(entry)),
    )
    _emit(render_summary(entries))
    return 0


def _run(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    try:
        config = load_config().with_overrides(iterations=args.iterations, warmup_runs=args.warmup)
    except ValueError as exc:
        logger.error("invalid-configuration", error=str(exc))
        return 1

    progress = _Progress()
    try:
        if args.mode == "basic":
            return _run_basic(args, config, progress)
        return _run_advanced(args, config, progress)
    except UnknownTimezoneError as exc:
        logger.error("unknown-timezone", error=str(exc))
        return 1
    except BenchmarkTerminated:
        print("\n\n🛑 Benchmark terminated")
        return 0
    except KeyboardInterrupt:
        print("\n\n🛑 Benchmark interrupted by user")
        return 0
    except Exception as exc:
        context = {"mode": args.mode, **progress.as_context()}
        logger.exception("benchmark-failed", error=str(exc), **context)
        report = write_error_report(exc, where="cli", context=context)
        logger.error("error-report-written", path=str(report.path))
        return 1


def _terminate(signum, _frame) -> None:  # type: ignore[no-untyped-def]
    raise BenchmarkTerminated(signal.Signals(signum).name)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=10 if args.verbose else 20)
    signal.signal(signal.SIGTERM, _terminate)
    return _run(args)


if __name__ == "__main__":
    sys.exit(main())
