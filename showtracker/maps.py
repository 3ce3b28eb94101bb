"""
Load-and-geocode pipeline for the map view.

``MapLoader.load`` geocodes the visible shows and returns the geocoded subset.
Every call starts a new generation; if another load starts before a call
finishes, the older call's results are dropped instead of merged.
"""

import logging
import threading
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from showtracker.dates import is_past
from showtracker.geocoding import Geocoder, geocode_batch
from showtracker.geocoding.base import DEFAULT_TIMEOUT
from showtracker.models import GeocodedShow, Show, ShowFilter, VenueSelection
from showtracker.venues import VenueMap

log = logging.getLogger(__name__)


class MapBackendUnavailable(RuntimeError):
    pass


def wait_for_backend(
    is_ready: Callable[[], bool],
    max_attempts: int = 20,
    interval: float = 0.5,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Poll ``is_ready`` until it returns True, at most ``max_attempts`` times."""
    for attempt in range(1, max_attempts + 1):
        if is_ready():
            return
        if attempt < max_attempts:
            sleep(interval)
    raise MapBackendUnavailable(f"Map backend not ready after {max_attempts} attempts")


@dataclass
class MapData:
    shows: list[Show]                  # everything passed to load()
    geocoded: list[GeocodedShow]       # the subset that geocoded, in input order

    @property
    def failed_count(self) -> int:
        return len(self.shows) - len(self.geocoded)

    @property
    def upcoming_count(self) -> int:
        return sum(1 for s in self.geocoded if not s.is_past)

    @property
    def past_count(self) -> int:
        return sum(1 for s in self.geocoded if s.is_past)

    def venue_map(
        self,
        show_filter: ShowFilter = ShowFilter.UPCOMING,
        on_show_select: Optional[Callable[[Show], None]] = None,
        on_venue_select: Optional[Callable[[VenueSelection], None]] = None,
    ) -> VenueMap:
        return VenueMap(self.geocoded, show_filter, on_show_select, on_venue_select)


class MapLoader:
    def __init__(self, geocoder: Geocoder, timeout: float = DEFAULT_TIMEOUT, max_workers: int = 8):
        self.geocoder = geocoder
        self.timeout = timeout
        self.max_workers = max_workers
        self._generation = 0
        self._lock = threading.Lock()

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def load(self, shows: list[Show], today: Optional[date] = None) -> Optional[MapData]:
        """Geocode ``shows``; returns None if a newer load superseded this one."""
        generation = self._next_generation()
        today = today or date.today()

        coords = geocode_batch(
            (s.address for s in shows),
            self.geocoder,
            timeout=self.timeout,
            max_workers=self.max_workers,
        )

        if not self.is_current(generation):
            log.info("Discarding superseded map load (generation %d)", generation)
            return None

        geocoded = []
        for show in shows:
            point = coords.get(show.address)
            if point is None:
                continue
            geocoded.append(GeocodedShow(
                **_show_fields(show),
                lat=point.lat,
                lng=point.lng,
                is_past=is_past(show, today),
            ))

        data = MapData(shows=list(shows), geocoded=geocoded)
        if data.failed_count:
            log.warning("%d of %d shows could not be geocoded", data.failed_count, len(shows))
        return data


def _show_fields(show: Show) -> dict:
    return {name: getattr(show, name) for name in Show.__dataclass_fields__}
