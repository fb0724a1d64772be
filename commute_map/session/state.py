# commute_map/session/state.py
"""
Snapshot of everything derived from the current office.
Replaced wholesale on every office change; never patched in place.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from commute_map.core.geometry import Coordinate


@dataclass(frozen=True)
class OfficeSnapshot:
    office: Optional[Coordinate] = None
    houses: Tuple[Coordinate, ...] = ()
    nearest: Optional[Coordinate] = None
    directions: Any = None  # whatever the router returned, or None

    def with_directions(self, directions: Any) -> "OfficeSnapshot":
        return replace(self, directions=directions)
