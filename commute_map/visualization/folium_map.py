# commute_map/visualization/folium_map.py
"""
Create an interactive Folium map of an office session.
Shows the office, clustered houses, commute circles and the selected route.
"""

from typing import Optional

import folium
from folium.plugins import MarkerCluster

from commute_map.config.paths import output_path
from commute_map.config.settings import MapSettings
from commute_map.search.rings import count_by_ring
from commute_map.services.routing import CommuteLeg
from commute_map.session.state import OfficeSnapshot


def build_commute_map(
    snapshot: OfficeSnapshot,
    settings: Optional[MapSettings] = None
) -> folium.Map:
    """Build the folium map for ``snapshot`` without saving it."""
    settings = settings or MapSettings()

    if snapshot.office is not None:
        center = snapshot.office.tuple_latlng
    else:
        center = (settings.DEFAULT_OFFICE_LAT, settings.DEFAULT_OFFICE_LNG)

    m = folium.Map(location=center, zoom_start=settings.ZOOM_START, tiles=settings.TILES)

    if snapshot.office is None:
        return m

    office = snapshot.office
    folium.Marker(
        location=office.tuple_latlng,
        icon=folium.Icon(color="black", icon="briefcase", prefix="fa"),
        popup=f"<b>Office</b><br>{office.lat:.5f}, {office.lng:.5f}",
        tooltip="Office"
    ).add_to(m)

    # Houses, clustered when zoomed out
    cluster = MarkerCluster(name="Houses").add_to(m)
    for i, house in enumerate(snapshot.houses):
        is_nearest = house == snapshot.nearest
        folium.Marker(
            location=house.tuple_latlng,
            icon=folium.Icon(color="green" if is_nearest else "blue", icon="home", prefix="fa"),
            popup=f"<b>House {i + 1}</b>" + ("<br>Nearest" if is_nearest else ""),
            tooltip=f"House {i + 1}"
        ).add_to(cluster)

    # Commute circles, far ring first so the close ring sits on top
    counts = count_by_ring(office, snapshot.houses, settings.RINGS)
    for ring in sorted(settings.RINGS, key=lambda r: r.z_index):
        folium.Circle(
            location=office.tuple_latlng,
            radius=ring.radius_m,
            color=ring.color,
            weight=settings.RING_STROKE_WEIGHT,
            opacity=settings.RING_STROKE_OPACITY,
            fill=True,
            fill_color=ring.color,
            fill_opacity=settings.RING_FILL_OPACITY,
            tooltip=f"{ring.radius_m / 1000:.0f} km: {counts[ring.name]} houses"
        ).add_to(m)

    # Directions
    if isinstance(snapshot.directions, CommuteLeg):
        folium.PolyLine(
            snapshot.directions.path,
            color=settings.ROUTE_COLOR,
            weight=settings.ROUTE_WEIGHT,
            opacity=0.9,
            tooltip=str(snapshot.directions)
        ).add_to(m)

    folium.LayerControl().add_to(m)
    return m


def create_commute_map(
    snapshot: OfficeSnapshot,
    output_file: Optional[str] = None,
    settings: Optional[MapSettings] = None
) -> str:
    """
    Generate and save the commute map.
    Returns the path to the saved file.
    """
    settings = settings or MapSettings()
    print("Generating commute map...")

    m = build_commute_map(snapshot, settings)

    output_path_full = output_path(output_file or settings.MAP_OUTPUT)
    m.save(str(output_path_full))
    print(f"Map saved to: {output_path_full}")
    return str(output_path_full)
