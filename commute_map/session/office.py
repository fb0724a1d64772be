# commute_map/session/office.py
"""
Office session.
Ties the pieces together: a new office regenerates the houses, recomputes
the nearest one and notifies subscribers. Setting the same office twice is
a no-op, so each distinct office is announced exactly once.
"""

from typing import Callable, List, Optional

from commute_map.config.settings import MapSettings
from commute_map.core.geometry import Coordinate
from commute_map.generation.random_points import PointGenerator
from commute_map.search.nearest import NearestPointFinder
from commute_map.services.geocoding import AddressSearch, ReverseGeocoder
from commute_map.services.routing import GeodesicRouter, Router
from commute_map.session.state import OfficeSnapshot

Subscriber = Callable[[OfficeSnapshot], None]


class OfficeSession:
    def __init__(
        self,
        generator: Optional[PointGenerator] = None,
        reverse_geocoder: Optional[ReverseGeocoder] = None,
        router: Optional[Router] = None,
        notifier: Callable[[str], None] = print,
        house_count: int = MapSettings.HOUSE_COUNT,
        finder: Optional[NearestPointFinder] = None
    ):
        """
        Args:
            generator: Source of synthetic houses (unseeded by default).
            reverse_geocoder: When given, the nearest house's address is
                              posted through ``notifier`` on every office change.
            router: Directions provider for ``fetch_directions``.
            notifier: Callable receiving notification text.
            house_count: Houses generated per office.
        """
        self.generator = generator or PointGenerator()
        self.finder = finder or NearestPointFinder()
        self.router = router or GeodesicRouter()
        self.reverse_geocoder = reverse_geocoder
        self.notifier = notifier
        self.house_count = house_count

        self._state = OfficeSnapshot()
        self._subscribers: List[Subscriber] = []

        if reverse_geocoder is not None:
            self.subscribe(self._notify_nearest)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for office changes. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_office(self, office: Coordinate) -> bool:
        """
        Move the session to ``office``.
        Returns False (and does nothing) when the office is unchanged.

        Every subscriber is called even if an earlier one raises; the first
        error is re-raised once all of them have run.
        """
        if office == self._state.office:
            return False

        houses = self.generator.generate(office, self.house_count)
        nearest = self.finder.find_nearest(office, houses) if houses else None
        self._state = OfficeSnapshot(office=office, houses=houses, nearest=nearest)
        print(f"Office set to ({office.lat:.5f}, {office.lng:.5f}): {len(houses)} houses generated")

        errors = []
        for callback in list(self._subscribers):
            try:
                callback(self._state)
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise errors[0]
        return True

    def search_office(self, query: str, address_search: AddressSearch) -> bool:
        """Resolve ``query`` with the address search collaborator and move there."""
        return self.set_office(address_search.locate(query))

    def fetch_directions(self, house: Coordinate):
        """
        Ask the router for directions from ``house`` to the office.
        Returns None when no office has been chosen yet.
        """
        if self._state.office is None:
            return None
        directions = self.router.route(house, self._state.office)
        self._state = self._state.with_directions(directions)
        return directions

    @property
    def office(self) -> Optional[Coordinate]:
        return self._state.office

    @property
    def houses(self):
        return self._state.houses

    @property
    def nearest(self) -> Optional[Coordinate]:
        return self._state.nearest

    @property
    def directions(self):
        return self._state.directions

    def snapshot(self) -> OfficeSnapshot:
        return self._state

    def _notify_nearest(self, snapshot: OfficeSnapshot) -> None:
        if snapshot.nearest is None:
            return
        address = self.reverse_geocoder.address_of(snapshot.nearest)
        self.notifier(f"Nearest house at {address}")
