# commute_map/services/routing.py
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from geopy.distance import geodesic

from commute_map.config.settings import MapSettings
from commute_map.core.geometry import Coordinate


class Router(Protocol):
    def route(self, origin: Coordinate, destination: Coordinate) -> Any:
        ...


@dataclass(frozen=True)
class CommuteLeg:
    """A single origin -> destination leg, like one leg of a directions result."""
    origin: Coordinate
    destination: Coordinate
    distance_km: float
    duration_seconds: float

    @property
    def path(self):
        return [self.origin.tuple_latlng, self.destination.tuple_latlng]

    def __str__(self) -> str:
        minutes = self.duration_seconds / 60
        return f"{self.distance_km:.1f} km, about {minutes:.0f} min"


class GeodesicRouter:
    """
    Straight-line router.
    Distance is the geodesic length; duration assumes a constant driving speed.
    """

    def __init__(self, settings: Optional[MapSettings] = None):
        self.settings = settings or MapSettings()

    def route(self, origin: Coordinate, destination: Coordinate) -> CommuteLeg:
        distance_km = geodesic(origin.tuple_latlng, destination.tuple_latlng).km
        return CommuteLeg(
            origin=origin,
            destination=destination,
            distance_km=distance_km,
            duration_seconds=distance_km * 1000 / self.settings.AVERAGE_SPEED_MPS
        )
