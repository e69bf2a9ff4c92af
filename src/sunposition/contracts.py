"""Core data contracts for sun position calculations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Location:
    """Observer location in degrees (north and east positive).

    Ranges are not validated here; callers are responsible for passing
    latitude in [-90, 90] and longitude in [-180, 180].
    """

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class SunPosition:
    """Sun position computed for one timestamp."""

    altitude: float
    azimuth: float
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize the position to a JSON-compatible dictionary."""
        return {
            "altitude": self.altitude,
            "azimuth": self.azimuth,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return (
            f"SunPosition(altitude={self.altitude}, azimuth={self.azimuth}, "
            f"timestamp={self.timestamp.isoformat()})"
        )
