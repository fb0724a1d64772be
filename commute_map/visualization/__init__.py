from .folium_map import build_commute_map, create_commute_map

__all__ = ["build_commute_map", "create_commute_map"]
