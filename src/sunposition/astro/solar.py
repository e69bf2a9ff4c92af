"""Sun position (azimuth/altitude) for a geolocation.

The formula is the closed-form approximation published as "Logikbaustein
19820" in the KNX-User-Forum download area. It uses a sinusoidal declination
model and local mean time, so it is accurate to roughly a degree, with no
refraction or equation-of-time correction.

All helpers accept scalars or numpy arrays. Degenerate geometry (sun exactly at
zenith or nadir, observer at a pole) is not guarded: the division in the
azimuth step yields non-finite floats which propagate to the result instead of
raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from math import pi

import numpy as np

from sunposition.contracts import Location, SunPosition

_K = pi / 180.0
_Y_LIMIT = 0.9999


def time_difference(
    hour: np.ndarray | float,
    minute: np.ndarray | float,
    longitude: np.ndarray | float,
) -> np.ndarray:
    """Return hours from local solar noon, adjusted for longitude."""
    hour = np.asarray(hour, dtype=np.float64)
    minute = np.asarray(minute, dtype=np.float64)
    longitude = np.asarray(longitude, dtype=np.float64)
    return hour + minute / 60.0 - (15.0 - longitude) / 15.0 - 11.0


def declination(day_of_year: np.ndarray | float) -> np.ndarray:
    """Return the approximate solar declination in degrees for a day of year."""
    return -23.45 * np.cos(_K * 360 * (np.asarray(day_of_year, dtype=np.float64) + 10) / 365)


def select_azimuth(timediff: np.ndarray | float, acos_deg: np.ndarray | float) -> np.ndarray:
    """Map `acos(y)` in degrees onto the full circle using the time offset.

    The table keeps the reference formula's four branches; the outer pairs
    share formulas with the inner ones. A non-finite `timediff` matches no
    branch and yields 0.
    """
    timediff = np.asarray(timediff, dtype=np.float64)
    acos_deg = np.asarray(acos_deg, dtype=np.float64)
    flipped = 360.0 - acos_deg
    return np.select(
        [
            timediff <= -12.0,
            (timediff > -12.0) & (timediff <= 0.0),
            (timediff > 0.0) & (timediff <= 12.0),
            timediff > 12.0,
        ],
        [flipped, acos_deg, flipped, acos_deg],
        default=0.0,
    )


def solve(
    latitude: np.ndarray | float,
    longitude: np.ndarray | float,
    day_of_year: np.ndarray | float,
    hour: np.ndarray | float,
    minute: np.ndarray | float,
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate the sun position formula element-wise.

    Returns:
        Tuple of `(altitude_deg, azimuth_deg)` arrays broadcast over inputs.
    """
    lat = np.asarray(latitude, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        timediff = time_difference(hour, minute, longitude)
        decl = declination(day_of_year)

        x = np.sin(_K * lat) * np.sin(_K * decl) + np.cos(_K * lat) * np.cos(_K * decl) * np.cos(
            _K * 15 * timediff
        )
        altitude = np.arcsin(x) / _K

        y = -1 * (np.sin(_K * lat) * x - np.sin(_K * decl)) / (np.cos(_K * lat) * np.sin(np.arccos(x)))
        # NaN fails both comparisons and passes through.
        y = np.where(y > _Y_LIMIT, _Y_LIMIT, np.where(y < -_Y_LIMIT, -_Y_LIMIT, y))

        azimuth = select_azimuth(timediff, np.arccos(y) / _K)
    return altitude, azimuth


class SunPositionCalculator:
    """Calculates sun positions for a fixed geolocation.

    Instances hold only the immutable location and may be shared freely
    between threads.
    """

    __slots__ = ("_location",)

    def __init__(self, latitude: float, longitude: float) -> None:
        self._location = Location(latitude=latitude, longitude=longitude)

    @property
    def location(self) -> Location:
        return self._location

    @property
    def latitude(self) -> float:
        return self._location.latitude

    @property
    def longitude(self) -> float:
        return self._location.longitude

    def compute(self, timestamp: datetime) -> SunPosition:
        """Compute the sun position at `timestamp`.

        Day of year, hour and minute are read from the timestamp's own
        calendar fields, i.e. in whatever timezone it carries. Seconds are
        ignored.
        """
        return self.compute_many([timestamp])[0]

    def compute_now_utc(self) -> SunPosition:
        """Compute the sun position for the current instant in UTC."""
        return self.compute(datetime.now(timezone.utc))

    def compute_many(self, timestamps: Sequence[datetime]) -> list[SunPosition]:
        """Compute sun positions for many timestamps in one vectorised pass."""
        if not timestamps:
            return []

        day_of_year = np.array([ts.timetuple().tm_yday for ts in timestamps], dtype=np.float64)
        hour = np.array([ts.hour for ts in timestamps], dtype=np.float64)
        minute = np.array([ts.minute for ts in timestamps], dtype=np.float64)

        altitude, azimuth = solve(self.latitude, self.longitude, day_of_year, hour, minute)
        return [
            SunPosition(altitude=float(alt), azimuth=float(az), timestamp=ts)
            for alt, az, ts in zip(altitude, azimuth, timestamps)
        ]

    def __repr__(self) -> str:
        return f"SunPositionCalculator(latitude={self.latitude!r}, longitude={self.longitude!r})"


def sun_position(timestamp: datetime, latitude: float, longitude: float) -> SunPosition:
    """Compute one sun position without keeping a calculator around."""
    return SunPositionCalculator(latitude, longitude).compute(timestamp)
