"""Tests for core data contracts."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from sunposition.contracts import Location, SunPosition


def test_location_is_immutable() -> None:
    """Location fields are fixed once created."""
    location = Location(latitude=49.45, longitude=8.67)

    with pytest.raises(dataclasses.FrozenInstanceError):
        location.latitude = 0.0  # type: ignore[misc]


def test_location_does_not_validate_ranges() -> None:
    """Range checks are left to callers."""
    location = Location(latitude=123.0, longitude=-400.0)

    assert location.latitude == 123.0
    assert location.longitude == -400.0


def test_sun_position_to_dict() -> None:
    """`to_dict` should produce a JSON-compatible payload with ISO timestamp."""
    dt = datetime(2024, 3, 20, 11, 0, tzinfo=timezone.utc)
    position = SunPosition(altitude=45.5, azimuth=180.25, timestamp=dt)

    assert position.to_dict() == {
        "altitude": 45.5,
        "azimuth": 180.25,
        "timestamp": "2024-03-20T11:00:00+00:00",
    }


def test_sun_position_str_and_immutability() -> None:
    dt = datetime(2024, 3, 20, 11, 0, tzinfo=timezone.utc)
    position = SunPosition(altitude=1.0, azimuth=2.0, timestamp=dt)

    assert str(position) == "SunPosition(altitude=1.0, azimuth=2.0, timestamp=2024-03-20T11:00:00+00:00)"
    with pytest.raises(dataclasses.FrozenInstanceError):
        position.azimuth = 3.0  # type: ignore[misc]
