# commute_map/config/settings.py

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RingStyle:
    name: str
    radius_m: float
    color: str
    z_index: int


@dataclass(frozen=True)
class MapSettings:
    # Office defaults
    DEFAULT_OFFICE_LAT: float = 43.45
    DEFAULT_OFFICE_LNG: float = -80.49
    ZOOM_START: int = 10
    TILES: str = "OpenStreetMap"

    # Synthetic houses
    HOUSE_COUNT: int = 100
    SCALE_FACTORS: Tuple[float, float] = (-2.0, 2.0)

    # Commute circles (radius in meters)
    RINGS: Tuple[RingStyle, ...] = (
        RingStyle("close", 15000.0, "#8BC34A", 3),
        RingStyle("middle", 30000.0, "#FBC02D", 2),
        RingStyle("far", 45000.0, "#FF5252", 1),
    )
    RING_STROKE_OPACITY: float = 0.5
    RING_STROKE_WEIGHT: int = 2
    RING_FILL_OPACITY: float = 0.05

    # Directions
    ROUTE_COLOR: str = "#1976D2"
    ROUTE_WEIGHT: int = 5
    AVERAGE_SPEED_MPS: float = 13.9  # ~50 km/h driving

    # Geocoding
    GEOCODER_USER_AGENT: str = "commute_map"
    GEOCODER_TIMEOUT_SECONDS: int = 10

    # Output
    MAP_OUTPUT: str = "commute_map.html"

    def __post_init__(self):
        if self.HOUSE_COUNT < 0:
            raise ValueError("HOUSE_COUNT cannot be negative")
        if self.AVERAGE_SPEED_MPS <= 0:
            raise ValueError("AVERAGE_SPEED_MPS must be positive")
        if any(scale == 0 for scale in self.SCALE_FACTORS):
            raise ValueError("SCALE_FACTORS cannot contain zero")
        radii = [ring.radius_m for ring in self.RINGS]
        if radii != sorted(radii):
            raise ValueError("RINGS must be ordered from smallest to largest radius")
