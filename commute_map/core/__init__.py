from .geometry import Coordinate
from .errors import AddressNotFound, CommuteMapError, EmptyInputError, InvalidArgumentError

__all__ = [
    "Coordinate",
    "CommuteMapError",
    "InvalidArgumentError",
    "EmptyInputError",
    "AddressNotFound",
]
