# commute_map/core/geometry.py
import math
from dataclasses import dataclass
from typing import Mapping

from shapely.geometry import Point


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Coordinate":
        """Build from a ``{"lat": .., "lng": ..}`` literal (``lon`` is accepted too)."""
        lng = data["lng"] if "lng" in data else data["lon"]
        return cls(lat=float(data["lat"]), lng=float(lng))

    @property
    def geometry(self) -> Point:
        return Point(self.lng, self.lat)  # shapely uses (lng, lat)

    @property
    def tuple_latlng(self):
        return (self.lat, self.lng)

    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lng)

    def as_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}
