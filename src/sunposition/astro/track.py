"""Sun track sampling over a time window."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from itertools import islice

import numpy as np

from sunposition.astro.solar import SunPositionCalculator
from sunposition.contracts import SunPosition
from sunposition.time.sampling import iter_sample_times


def sun_track(
    calculator: SunPositionCalculator,
    start: datetime,
    end: datetime,
    step_minutes: int,
    max_points: int | None = None,
) -> list[SunPosition]:
    """Sample sun positions on [start, end) every `step_minutes`.

    Raises:
        ValueError: If the step is not positive, the window is reversed, or
            the sample count exceeds `max_points`.
    """
    samples = iter_sample_times(start, end, step_minutes)
    if max_points is not None:
        samples = islice(samples, max_points + 1)
    timestamps = list(samples)
    if max_points is not None and len(timestamps) > max_points:
        raise ValueError("track points exceed max_points safety cap")
    return calculator.compute_many(timestamps)


def track_arrays(positions: Sequence[SunPosition]) -> tuple[np.ndarray, np.ndarray]:
    """Return `(altitudes, azimuths)` arrays for a sampled track."""
    altitudes = np.array([p.altitude for p in positions], dtype=np.float64)
    azimuths = np.array([p.azimuth for p in positions], dtype=np.float64)
    return altitudes, azimuths
