import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class Show:
    launch_date: str = ""      # MM/DD/YYYY, blank means visible immediately
    show_date: str = ""        # MM/DD/YYYY
    show_time: str = ""        # may hold several comma-separated showtimes
    venue: str = ""
    address: str = ""          # free text, parsed on demand
    group: str = ""            # performing act
    ticket_url: str = ""
    show_type: str = ""
    show_description: str = ""
    lineup: str = ""           # "::"-delimited performer entries
    show_image: str = ""
    livestream_ticket_url: str = ""
    capacity: str = ""         # not a sheet column, kept for the detail view


@dataclass(frozen=True)
class GeocodedShow(Show):
    lat: float = 0.0
    lng: float = 0.0
    is_past: bool = False


@dataclass(frozen=True)
class AddressInfo:
    full_address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "USA"


@dataclass(frozen=True)
class LineupEntry:
    name: str
    instrument: str = ""
    instagram_link: Optional[str] = None
    website_link: Optional[str] = None


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


class ShowFilter(str, Enum):
    UPCOMING = "upcoming"
    PAST = "past"
    ALL = "all"


@dataclass
class VenueGroup:
    group_id: str              # venue name + rounded coordinates
    venue: str
    address: str
    lat: float
    lng: float
    shows: list[GeocodedShow] = field(default_factory=list)


@dataclass
class VenueSelection:
    """A venue opened from the map, carrying the filter that was active."""
    name: str
    shows: list[Show]
    default_filter: ShowFilter = ShowFilter.UPCOMING


def show_id(show: Show) -> str:
    """Slug identifying a show inside a venue popup."""
    return _NON_ALNUM.sub("_", f"{show.venue}_{show.show_date}_{show.group}")
