"""Synthetic timestamp batches.

Kept inside `src/` so the suite does not depend on the test package.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def to_iso_utc(moment: datetime) -> str:
    """Formats like JavaScript's `Date.toISOString()`: `2024-01-01T00:00:00.000Z`."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def generate_timestamps(
    size: int,
    *,
    base: datetime | None = None,
    step: timedelta = timedelta(days=1),
) -> list[str]:
    """Returns `size` distinct ISO UTC strings, `base + i * step`.

    `base` defaults to the current time, so batches differ between runs.
    A naive `base` is taken as UTC.
    """

    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    if step <= timedelta(0):
        raise ValueError("step must be positive")

    start = base if base is not None else datetime.now(timezone.utc)
    return [to_iso_utc(start + i * step) for i in range(int(size))]


def repeated_timestamps(size: int, *, instant: datetime | None = None) -> list[str]:
    """Returns `size` copies of a single instant (defaults to now)."""

    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")

    value = to_iso_utc(instant if instant is not None else datetime.now(timezone.utc))
    return [value] * int(size)
