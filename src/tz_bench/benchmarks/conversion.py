"""UTC -> IANA timezone conversion workload.

Zone rules come from `zoneinfo`, backed by the `tzdata` package where the
system has no tz database.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class UnknownTimezoneError(ValueError):
    """Raised for names missing from the IANA timezone database."""


def resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownTimezoneError(f"unknown timezone: {name!r}") from exc


def parse_utc(value: str) -> datetime:
    """Parses an ISO-8601 string; a trailing `Z` or missing offset means UTC."""

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def make_converter(timezone_name: str, output_format: str) -> Callable[[str], str]:
    """Returns `timestamp -> formatted local time` for one zone."""

    zone = resolve_timezone(timezone_name)

    def convert(timestamp: str) -> str:
        return parse_utc(timestamp).astimezone(zone).strftime(output_format)

    return convert


def make_workload(timezone_name: str, output_format: str) -> Callable[[Sequence[str]], list[str]]:
    """Returns a batch workload converting every timestamp of the batch."""

    convert = make_converter(timezone_name, output_format)

    def workload(batch: Sequence[str]) -> list[str]:
        return [convert(ts) for ts in batch]

    return workload
