"""
Geocoder registry.

To add a geocoding backend, subclass Geocoder in its own module and register
it in GEOCODERS below under the name used by [geocoding] provider.
"""

from showtracker.geocoding.base import Geocoder
from showtracker.geocoding.batch import geocode_batch
from showtracker.geocoding.mapbox import MapboxGeocoder

GEOCODERS: dict[str, type[Geocoder]] = {
    "mapbox": MapboxGeocoder,
}

__all__ = ["GEOCODERS", "Geocoder", "MapboxGeocoder", "geocode_batch"]
