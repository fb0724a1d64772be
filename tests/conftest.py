"""Shared fixtures: a fixed office and in-memory collaborators."""

import random
from types import SimpleNamespace

import pytest

from commute_map.core.geometry import Coordinate
from commute_map.generation.random_points import PointGenerator


class RecordingReverseGeocoder:
    def __init__(self):
        self.calls = []

    def address_of(self, coordinate):
        self.calls.append(coordinate)
        return f"{coordinate.lat:.3f}, {coordinate.lng:.3f} Test Street"


class FixedAddressSearch:
    def __init__(self, places):
        self.places = places

    def locate(self, query):
        return self.places[query]


class FakeGeolocator:
    """Stands in for a geopy geocoder."""

    def __init__(self, forward=None, reverse_address=None):
        self.forward = forward or {}
        self.reverse_address = reverse_address

    def geocode(self, query):
        if query not in self.forward:
            return None
        lat, lng = self.forward[query]
        return SimpleNamespace(latitude=lat, longitude=lng, address=query)

    def reverse(self, latlng):
        if self.reverse_address is None:
            return None
        return SimpleNamespace(latitude=latlng[0], longitude=latlng[1], address=self.reverse_address)


@pytest.fixture()
def office() -> Coordinate:
    return Coordinate(lat=43.45, lng=-80.49)


@pytest.fixture()
def seeded_generator() -> PointGenerator:
    return PointGenerator(rng=random.Random(1234))


@pytest.fixture()
def reverse_geocoder() -> RecordingReverseGeocoder:
    return RecordingReverseGeocoder()


@pytest.fixture()
def geolocator() -> FakeGeolocator:
    """A geocoder that knows one place in each direction."""
    return FakeGeolocator(forward={"Waterloo": (43.46, -80.52)}, reverse_address="1 King St")


@pytest.fixture()
def empty_geolocator() -> FakeGeolocator:
    return FakeGeolocator()


@pytest.fixture()
def address_search(office: Coordinate) -> FixedAddressSearch:
    return FixedAddressSearch({"HQ": office})
