"""Deterministic timestamp sampling utilities."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def iter_sample_times(start: datetime, end: datetime, step_minutes: int) -> Iterator[datetime]:
    """Yield timestamps from [start, end) at step_minutes cadence.

    Samples keep the timezone of `start`; an aware `end` is converted into it.
    Mixing naive and aware bounds is rejected.
    """
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise ValueError("start and end must both be naive or both be timezone-aware")
    if start.tzinfo is not None:
        end = end.astimezone(start.tzinfo)
    if end < start:
        raise ValueError("end must be >= start")

    current = start
    step = timedelta(minutes=step_minutes)
    while current < end:
        yield current
        current = current + step
