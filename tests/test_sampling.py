"""Tests for timestamp sampling helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from sunposition.time.sampling import iter_sample_times, to_utc


def test_to_utc_with_naive_datetime() -> None:
    """Naive datetimes should be treated as UTC."""
    assert to_utc(datetime(2024, 5, 12, 9, 37)) == datetime(2024, 5, 12, 9, 37, tzinfo=UTC)


def test_to_utc_with_non_utc_timezone() -> None:
    """Aware datetimes should be converted to UTC."""
    kst = timezone(timedelta(hours=9))
    out = to_utc(datetime(2024, 5, 13, 3, 5, tzinfo=kst))

    assert out == datetime(2024, 5, 12, 18, 5, tzinfo=UTC)
    assert out.tzinfo == UTC


def test_iter_sample_times_half_open_window() -> None:
    """Samples cover [start, end) at the requested cadence."""
    start = datetime(2024, 5, 12, 9, 0, tzinfo=UTC)
    samples = list(iter_sample_times(start, start + timedelta(hours=1), 15))

    assert samples == [start + timedelta(minutes=15 * i) for i in range(4)]


def test_iter_sample_times_keeps_start_timezone() -> None:
    """Samples are expressed in the timezone of `start`."""
    cest = timezone(timedelta(hours=2))
    start = datetime(2024, 6, 1, 12, 0, tzinfo=cest)
    end = datetime(2024, 6, 1, 11, 0, tzinfo=UTC)

    samples = list(iter_sample_times(start, end, 30))

    assert [s.hour for s in samples] == [12, 12]
    assert all(s.tzinfo == cest for s in samples)


def test_iter_sample_times_rejects_bad_arguments() -> None:
    start = datetime(2024, 5, 12, 9, 0, tzinfo=UTC)

    with pytest.raises(ValueError, match="step_minutes must be positive"):
        list(iter_sample_times(start, start + timedelta(hours=1), 0))
    with pytest.raises(ValueError, match="end must be >= start"):
        list(iter_sample_times(start, start - timedelta(hours=1), 10))


def test_iter_sample_times_rejects_mixed_awareness() -> None:
    """Naive and aware bounds cannot be compared and should be rejected."""
    with pytest.raises(ValueError, match="both be naive or both be timezone-aware"):
        list(iter_sample_times(datetime(2024, 1, 1), datetime(2024, 1, 2, tzinfo=UTC), 60))
    with pytest.raises(ValueError, match="both be naive or both be timezone-aware"):
        list(iter_sample_times(datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 2), 60))


def test_iter_sample_times_naive_bounds() -> None:
    start = datetime(2024, 1, 1, 6, 0)

    samples = list(iter_sample_times(start, start + timedelta(hours=1), 30))

    assert samples == [start, start + timedelta(minutes=30)]
