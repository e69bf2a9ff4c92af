"""Command-line entrypoint for sunposition."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from datetime import datetime, timezone

from sunposition import __version__
from sunposition.astro.solar import SunPositionCalculator
from sunposition.astro.track import sun_track


def _parse_iso_datetime(value: str) -> datetime:
    """Parse ISO datetime string, keeping its offset and assuming UTC when naive."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid datetime: {value}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunposition",
        description="Sun position (azimuth/altitude) calculator.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    position = subparsers.add_parser(
        "position",
        help="Print the sun position for one location and time (default: now, UTC).",
    )
    position.add_argument("--lat", type=float, required=True)
    position.add_argument("--lon", type=float, required=True)
    position.add_argument(
        "--time",
        type=_parse_iso_datetime,
        default=None,
        help=(
            "ISO timestamp; its wall-clock fields are used in its own offset "
            "(unlike the HTTP API, which converts to UTC first). Naive values are UTC."
        ),
    )

    track = subparsers.add_parser(
        "track",
        help="Print sun positions sampled over [start, end).",
    )
    track.add_argument("--lat", type=float, required=True)
    track.add_argument("--lon", type=float, required=True)
    track.add_argument("--start", type=_parse_iso_datetime, required=True)
    track.add_argument("--end", type=_parse_iso_datetime, required=True)
    track.add_argument("--step-minutes", type=int, default=15)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "position":
        calculator = SunPositionCalculator(args.lat, args.lon)
        if args.time is None:
            result = calculator.compute_now_utc()
        else:
            result = calculator.compute(args.time)
        print(json.dumps(result.to_dict()))
        return 0

    if args.command == "track":
        calculator = SunPositionCalculator(args.lat, args.lon)
        try:
            positions = sun_track(calculator, args.start, args.end, args.step_minutes)
        except ValueError as exc:
            parser.error(str(exc))
        print(json.dumps([p.to_dict() for p in positions]))
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
