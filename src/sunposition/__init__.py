"""Sun position (azimuth/altitude) for a geolocation and timestamp."""

from sunposition.astro.solar import SunPositionCalculator, sun_position
from sunposition.contracts import Location, SunPosition

__version__ = "0.1.0"

__all__ = [
    "Location",
    "SunPosition",
    "SunPositionCalculator",
    "sun_position",
    "__version__",
]
