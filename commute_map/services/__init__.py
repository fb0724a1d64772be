from .geocoding import AddressSearch, GeopyAddressSearch, GeopyReverseGeocoder, ReverseGeocoder
from .routing import CommuteLeg, GeodesicRouter, Router

__all__ = [
    "AddressSearch",
    "ReverseGeocoder",
    "GeopyAddressSearch",
    "GeopyReverseGeocoder",
    "Router",
    "CommuteLeg",
    "GeodesicRouter",
]
