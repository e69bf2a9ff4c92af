"""FastAPI app exposing sun position endpoints."""

from __future__ import annotations

import os
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from sunposition import __version__
from sunposition.astro.solar import SunPositionCalculator
from sunposition.astro.track import sun_track
from sunposition.contracts import SunPosition
from sunposition.orchestrate.batch import GridSpec, compute_position_grid
from sunposition.time.sampling import to_utc

_DEFAULT_MAX_TRACK_POINTS = 1440


class PositionRequest(BaseModel):
    """Request schema for one sun position."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    time_utc: datetime | None = None


class PositionResponse(BaseModel):
    """Response schema aligned with the SunPosition contract."""

    altitude: float
    azimuth: float
    timestamp: datetime

    @classmethod
    def from_contract(cls, position: SunPosition) -> "PositionResponse":
        return cls(
            altitude=position.altitude,
            azimuth=position.azimuth,
            timestamp=position.timestamp,
        )


class TrackRequest(BaseModel):
    """Request schema for a sampled sun track."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    start_utc: datetime
    end_utc: datetime
    step_minutes: int = Field(default=15, ge=1, le=24 * 60)

    @model_validator(mode="after")
    def validate_window(self) -> "TrackRequest":
        """Validate window ordering."""
        if _normalize_time(self.start_utc) > _normalize_time(self.end_utc):
            raise ValueError("start_utc must be <= end_utc")
        return self


class TrackResponse(BaseModel):
    """Track response payload."""

    positions: list[PositionResponse]


class GridSpecRequest(BaseModel):
    """Observer lattice; bounds are checked by the grid builder."""

    lat_min: float = Field(ge=-90.0, le=90.0)
    lat_max: float = Field(ge=-90.0, le=90.0)
    lon_min: float = Field(ge=-180.0, le=180.0)
    lon_max: float = Field(ge=-180.0, le=180.0)
    step_deg: float = Field(gt=0.0, le=30.0)
    max_points: int = Field(default=5_000, ge=1, le=50_000)

    def to_spec(self) -> GridSpec:
        return GridSpec(**self.model_dump())


class GridRequest(BaseModel):
    """Request schema for evaluating a lat/lon grid."""

    time_utc: datetime | None = None
    grid_spec: GridSpecRequest


class GridResponse(BaseModel):
    """Grid response payload keyed by `lat=…,lon=…`."""

    positions: dict[str, PositionResponse]


def _normalize_time(dt: datetime | None) -> datetime:
    """Normalize optional datetime to timezone-aware UTC value."""
    if dt is None:
        return datetime.now(timezone.utc)
    return to_utc(dt)


def _resolve_max_track_points(max_track_points: int | None) -> int:
    """Resolve track cap from argument/environment with validation."""
    if max_track_points is None:
        raw = os.getenv("SUNPOSITION_MAX_TRACK_POINTS", str(_DEFAULT_MAX_TRACK_POINTS))
        try:
            max_track_points = int(raw)
        except ValueError as exc:
            raise ValueError("SUNPOSITION_MAX_TRACK_POINTS must be an integer") from exc
    if max_track_points <= 0:
        raise ValueError("SUNPOSITION_MAX_TRACK_POINTS must be positive")
    return max_track_points


def create_app(max_track_points: int | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sun Position API", version=__version__)

    track_cap = _resolve_max_track_points(max_track_points)
    app.state.max_track_points = track_cap

    @app.post("/position", response_model=PositionResponse)
    def post_position(payload: PositionRequest) -> PositionResponse:
        """Compute the sun position for input time/location."""
        dt = _normalize_time(payload.time_utc)
        position = SunPositionCalculator(payload.lat, payload.lon).compute(dt)
        return PositionResponse.from_contract(position)

    @app.post("/track", response_model=TrackResponse)
    def post_track(payload: TrackRequest) -> TrackResponse:
        """Sample the sun track for a location over a UTC window."""
        calculator = SunPositionCalculator(payload.lat, payload.lon)
        try:
            positions = sun_track(
                calculator,
                _normalize_time(payload.start_utc),
                _normalize_time(payload.end_utc),
                payload.step_minutes,
                max_points=track_cap,
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return TrackResponse(positions=[PositionResponse.from_contract(p) for p in positions])

    @app.post("/grid", response_model=GridResponse)
    def post_grid(payload: GridRequest) -> GridResponse:
        """Compute sun positions over a lat/lon grid at one instant."""
        dt = _normalize_time(payload.time_utc)
        try:
            grid = compute_position_grid(dt, payload.grid_spec.to_spec())
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return GridResponse(
            positions={key: PositionResponse.from_contract(p) for key, p in grid.items()}
        )

    return app


app = create_app()
