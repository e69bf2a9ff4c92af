"""Demo: print the current sun position over a coarse lat/lon grid."""

from __future__ import annotations

from datetime import datetime, timezone

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sunposition.orchestrate.batch import GridSpec, compute_position_grid  # noqa: E402


def main() -> int:
    """Evaluate a grid at the current UTC instant and print a table."""
    now_utc = datetime.now(timezone.utc)

    grid = GridSpec(
        lat_min=-60.0,
        lat_max=60.0,
        lon_min=-180.0,
        lon_max=180.0,
        step_deg=60.0,
    )
    positions = compute_position_grid(now_utc, grid)

    print("=== Sun Position Grid Demo ===")
    print(f"time_utc: {now_utc.isoformat()}\n")
    print("key                       | altitude | azimuth")
    print("--------------------------+----------+---------")
    for key, position in positions.items():
        print(f"{key:<25} | {position.altitude:>8.3f} | {position.azimuth:>7.3f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
