"""Batch evaluation of sun positions over a lat/lon grid."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import numpy as np

from sunposition.astro.solar import SunPositionCalculator
from sunposition.contracts import SunPosition


@dataclass(frozen=True)
class GridSpec:
    """Observer locations on a regular lat/lon lattice, endpoints included."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float
    step_deg: float
    max_points: int | None = None

    def axis_lengths(self) -> tuple[int, int]:
        """Return `(n_lat, n_lon)` sample counts for the lattice."""
        return (
            _axis_length(self.lat_min, self.lat_max, self.step_deg),
            _axis_length(self.lon_min, self.lon_max, self.step_deg),
        )


def _axis_length(lo: float, hi: float, step: float) -> int:
    if step <= 0.0:
        raise ValueError("step must be positive.")
    if lo > hi:
        raise ValueError("start must be <= stop.")
    return int(np.floor((hi - lo) / step + 1e-9)) + 1


def _axis(lo: float, step: float, count: int) -> list[float]:
    return np.round(lo + step * np.arange(count), 6).tolist()


def generate_lat_lon_grid(spec: GridSpec) -> list[tuple[float, float]]:
    """Generate `(lat, lon)` observer points, latitude-major.

    Raises:
        ValueError: On a non-positive step, reversed bounds, or more points
            than `spec.max_points`.
    """
    n_lat, n_lon = spec.axis_lengths()
    if spec.max_points is not None and n_lat * n_lon > spec.max_points:
        raise ValueError("grid points exceed max_points safety cap")
    lats = _axis(spec.lat_min, spec.step_deg, n_lat)
    lons = _axis(spec.lon_min, spec.step_deg, n_lon)
    return [(lat, lon) for lat in lats for lon in lons]


def grid_key(lat: float, lon: float) -> str:
    return f"lat={lat:.3f},lon={lon:.3f}"


def compute_position_grid(dt: datetime, spec: GridSpec) -> dict[str, SunPosition]:
    """Compute the sun position at `dt` for every grid point."""
    return {
        grid_key(lat, lon): SunPositionCalculator(lat, lon).compute(dt)
        for lat, lon in generate_lat_lon_grid(spec)
    }
