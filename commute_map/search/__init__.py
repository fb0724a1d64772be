from .nearest import NearestPointFinder, find_nearest, proximity_score
from .rings import count_by_ring, haversine_km, ring_for

__all__ = [
    "NearestPointFinder",
    "find_nearest",
    "proximity_score",
    "count_by_ring",
    "haversine_km",
    "ring_for",
]
