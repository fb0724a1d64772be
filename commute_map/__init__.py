"""commute_map: nearest house search and synthetic houses around an office."""

from commute_map.core import (
    AddressNotFound,
    CommuteMapError,
    Coordinate,
    EmptyInputError,
    InvalidArgumentError,
)
from commute_map.generation import PointGenerator, generate_houses
from commute_map.search import NearestPointFinder, find_nearest
from commute_map.session import OfficeSession, OfficeSnapshot

__all__ = [
    "Coordinate",
    "PointGenerator",
    "generate_houses",
    "NearestPointFinder",
    "find_nearest",
    "OfficeSession",
    "OfficeSnapshot",
    "CommuteMapError",
    "InvalidArgumentError",
    "EmptyInputError",
    "AddressNotFound",
]
