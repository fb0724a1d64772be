# commute_map/services/geocoding.py
"""
Address search and reverse geocoding backed by geopy.
Both adapters accept a ready-made geolocator so another geopy backend
(or a stub) can be swapped in.
"""

from typing import Optional, Protocol

from geopy.geocoders import Nominatim

from commute_map.config.settings import MapSettings
from commute_map.core.errors import AddressNotFound
from commute_map.core.geometry import Coordinate


class AddressSearch(Protocol):
    def locate(self, query: str) -> Coordinate:
        ...


class ReverseGeocoder(Protocol):
    def address_of(self, coordinate: Coordinate) -> str:
        ...


def _default_geolocator(settings: MapSettings) -> Nominatim:
    return Nominatim(
        user_agent=settings.GEOCODER_USER_AGENT,
        timeout=settings.GEOCODER_TIMEOUT_SECONDS
    )


class GeopyAddressSearch:
    """Turns a free-text address into the first matching coordinate."""

    def __init__(self, geolocator=None, settings: Optional[MapSettings] = None):
        self.geolocator = geolocator or _default_geolocator(settings or MapSettings())

    def locate(self, query: str) -> Coordinate:
        location = self.geolocator.geocode(query)
        if location is None:
            raise AddressNotFound(query)
        return Coordinate(lat=location.latitude, lng=location.longitude)


class GeopyReverseGeocoder:
    """Formats a coordinate as a human-readable address."""

    def __init__(self, geolocator=None, settings: Optional[MapSettings] = None):
        self.geolocator = geolocator or _default_geolocator(settings or MapSettings())

    def address_of(self, coordinate: Coordinate) -> str:
        location = self.geolocator.reverse(coordinate.tuple_latlng)
        if location is None:
            raise AddressNotFound(f"{coordinate.lat}, {coordinate.lng}")
        return location.address
