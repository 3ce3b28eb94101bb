"""
Mapbox forward geocoding.

Endpoint: https://api.mapbox.com/geocoding/v5/mapbox.places/<query>.json
  - access_token and limit=1 as query parameters
  - features[0].center is [lng, lat]
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from showtracker.geocoding.base import DEFAULT_TIMEOUT, Geocoder
from showtracker.models import Coordinates

log = logging.getLogger(__name__)

_BASE = "https://api.mapbox.com/geocoding/v5/mapbox.places"
_HEADERS = {"User-Agent": "showtracker/0.1"}


class MapboxGeocoder(Geocoder):
    def __init__(self, geocoding_cfg: dict):
        super().__init__(geocoding_cfg)
        self.token = geocoding_cfg.get("token", "")

    def geocode(self, address: str, timeout: float = DEFAULT_TIMEOUT) -> Optional[Coordinates]:
        if not address.strip():
            return None
        url = f"{_BASE}/{quote(address, safe='')}.json"
        try:
            r = requests.get(
                url,
                params={"access_token": self.token, "limit": 1},
                headers=_HEADERS,
                timeout=timeout,
            )
            r.raise_for_status()
            data = r.json()
            if not isinstance(data, dict):
                log.warning("Unexpected geocoding response for %r", address)
                return None
            features = data.get("features") or []
            if not features:
                return None
            lng, lat = features[0]["center"][:2]
            return Coordinates(lat=float(lat), lng=float(lng))
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            log.warning("Geocoding failed for %r: %s", address, exc)
            return None
