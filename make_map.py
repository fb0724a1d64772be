import sys

from commute_map.config.settings import MapSettings
from commute_map.core.geometry import Coordinate
from commute_map.data.loader import load_points
from commute_map.search.nearest import find_nearest
from commute_map.services.geocoding import GeopyAddressSearch, GeopyReverseGeocoder
from commute_map.session.office import OfficeSession
from commute_map.session.state import OfficeSnapshot
from commute_map.visualization.folium_map import create_commute_map

# Usage:
#   python make_map.py                      default office, random houses
#   python make_map.py "200 University Ave W, Waterloo"
#   python make_map.py "<address>" houses.csv

settings = MapSettings()
session = OfficeSession(reverse_geocoder=GeopyReverseGeocoder(settings=settings))

if len(sys.argv) > 1:
    session.search_office(sys.argv[1], GeopyAddressSearch(settings=settings))
else:
    session.set_office(Coordinate(settings.DEFAULT_OFFICE_LAT, settings.DEFAULT_OFFICE_LNG))

if len(sys.argv) > 2:
    # Houses from the file replace the generated ones on the map
    houses = load_points(sys.argv[2])
    nearest = find_nearest(session.office, houses)
    print(f'Nearest house from {sys.argv[2]}: {nearest.lat:.5f}, {nearest.lng:.5f}')
    snapshot = OfficeSnapshot(office=session.office, houses=houses, nearest=nearest)
    snapshot = snapshot.with_directions(session.router.route(nearest, session.office))
else:
    session.fetch_directions(session.nearest)
    snapshot = session.snapshot()

print(f'Houses: {len(snapshot.houses)}')
print(f'Directions: {snapshot.directions}')

create_commute_map(snapshot, settings=settings)
