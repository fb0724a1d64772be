# commute_map/search/rings.py
"""
Commute ring classification.
Rings are concentric circles around the office, smallest first.
"""

from typing import Dict, Iterable, Optional, Sequence

import numpy as np

from commute_map.config.settings import MapSettings, RingStyle
from commute_map.core.geometry import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(coord1, coord2):
    """Great-circle distance in km. Accepts (lat, lng) pairs or arrays of them."""
    lat1, lon1 = np.radians(coord1)
    lat2, lon2 = np.radians(coord2)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = np.sin(dlat/2)**2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon/2)**2
    c = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
    return EARTH_RADIUS_KM * c


def ring_for(
    reference: Coordinate,
    point: Coordinate,
    rings: Sequence[RingStyle] = MapSettings.RINGS
) -> Optional[RingStyle]:
    """Smallest ring containing ``point``, or None when it lies outside all of them."""
    distance_m = float(haversine_km(reference.tuple_latlng, point.tuple_latlng)) * 1000
    for ring in rings:
        if distance_m <= ring.radius_m:
            return ring
    return None


def count_by_ring(
    reference: Coordinate,
    points: Iterable[Coordinate],
    rings: Sequence[RingStyle] = MapSettings.RINGS
) -> Dict[str, int]:
    """
    Number of points inside each ring.
    Counts are cumulative: a point in the close ring is also in the far ring.
    """
    coords = np.array([p.tuple_latlng for p in points], dtype=float)
    if coords.size == 0:
        return {ring.name: 0 for ring in rings}

    distances_m = haversine_km(
        (np.full(len(coords), reference.lat), np.full(len(coords), reference.lng)),
        (coords[:, 0], coords[:, 1])
    ) * 1000
    return {ring.name: int(np.count_nonzero(distances_m <= ring.radius_m)) for ring in rings}
