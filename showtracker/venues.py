"""
Grouping geocoded shows into map markers.

Shows are grouped by venue name plus coordinates rounded to three decimal
places (about 110 m), so one venue geocoded slightly differently for two
shows still lands on one marker while two different venues next door do not.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from showtracker.dates import parse_date
from showtracker.models import GeocodedShow, Show, ShowFilter, VenueGroup, VenueSelection, show_id


class MarkerColor(str, Enum):
    UPCOMING = "#2563EB"
    PAST = "#6B7280"
    MIXED = "#8B5CF6"


MAX_POPUP_SHOWS = 2


def _round3(value: float) -> int:
    # Half-up, matching Math.round on the browser side.
    return math.floor(value * 1000 + 0.5)


def venue_key(show: GeocodedShow) -> str:
    return f"{show.venue}_{_round3(show.lat)}_{_round3(show.lng)}"


def group_by_venue(shows: Iterable[GeocodedShow]) -> list[VenueGroup]:
    """One group per venue key, in first-seen order.

    Venue, address and coordinates come from the first show seen for a key;
    shows keep encounter order within their group.
    """
    groups: dict[str, VenueGroup] = {}
    for show in shows:
        key = venue_key(show)
        if key not in groups:
            groups[key] = VenueGroup(
                group_id=key,
                venue=show.venue,
                address=show.address,
                lat=show.lat,
                lng=show.lng,
            )
        groups[key].shows.append(show)
    return list(groups.values())


def marker_color(group: VenueGroup, show_filter: ShowFilter) -> MarkerColor:
    upcoming = sum(1 for s in group.shows if not s.is_past)
    past = len(group.shows) - upcoming
    if show_filter == ShowFilter.UPCOMING or (upcoming and not past):
        return MarkerColor.UPCOMING
    if show_filter == ShowFilter.PAST or (past and not upcoming):
        return MarkerColor.PAST
    return MarkerColor.MIXED


def badge_text(group: VenueGroup) -> Optional[str]:
    count = len(group.shows)
    if count <= 1:
        return None
    return "99+" if count > 99 else str(count)


def _date_key(show: Show):
    parsed = parse_date(show.show_date)
    return (parsed is None, parsed)


def popup_order(shows: Iterable[GeocodedShow]) -> list[GeocodedShow]:
    """Shows sorted by date ascending; shows with unreadable dates go last."""
    return sorted(shows, key=_date_key)


@dataclass
class PopupShow:
    show_id: str
    group: str
    show_date: str
    is_past: bool


@dataclass
class Popup:
    venue: str
    shows: list[PopupShow]
    remaining: int
    upcoming_count: Optional[int]   # only set when the venue has several shows
    past_count: Optional[int]
    button_label: str


def popup_content(group: VenueGroup, max_shows: int = MAX_POPUP_SHOWS) -> Popup:
    ordered = popup_order(group.shows)
    several = len(ordered) > 1
    upcoming = sum(1 for s in ordered if not s.is_past)
    return Popup(
        venue=group.venue,
        shows=[
            PopupShow(show_id=show_id(s), group=s.group, show_date=s.show_date, is_past=s.is_past)
            for s in ordered[:max_shows]
        ],
        remaining=max(len(ordered) - max_shows, 0),
        upcoming_count=upcoming if several else None,
        past_count=len(ordered) - upcoming if several else None,
        button_label="View All Shows at This Venue" if several else "View Venue Details",
    )


class VenueMap:
    """
    Venue groups for one map render, plus the lookups marker clicks need.

    Args:
        all_shows:       every geocoded show, regardless of filter. Opening a
                         venue lists all of its shows.
        show_filter:     the filter currently applied to the markers.
        on_show_select:  called with the Show a popup entry refers to.
        on_venue_select: called with a VenueSelection when "view venue" is used.
    """

    def __init__(
        self,
        all_shows: list[GeocodedShow],
        show_filter: ShowFilter = ShowFilter.UPCOMING,
        on_show_select: Optional[Callable[[Show], None]] = None,
        on_venue_select: Optional[Callable[[VenueSelection], None]] = None,
    ):
        self.all_shows = all_shows
        self.show_filter = show_filter
        self.on_show_select = on_show_select
        self.on_venue_select = on_venue_select
        self.groups = group_by_venue(filter_geocoded(all_shows, show_filter))
        self._by_id = {g.group_id: g for g in self.groups}

    def lookup(self, group_id: str, sid: str) -> Optional[GeocodedShow]:
        group = self._by_id.get(group_id)
        if group is None:
            return None
        return next((s for s in group.shows if show_id(s) == sid), None)

    def select_show(self, group_id: str, sid: str) -> Optional[GeocodedShow]:
        show = self.lookup(group_id, sid)
        if show is not None and self.on_show_select is not None:
            self.on_show_select(show)
        return show

    def select_venue(self, venue_name: str) -> Optional[VenueSelection]:
        group = next((g for g in group_by_venue(self.all_shows) if g.venue == venue_name), None)
        if group is None or not group.shows:
            return None
        selection = VenueSelection(
            name=group.venue,
            shows=list(group.shows),
            default_filter=self.show_filter,
        )
        if self.on_venue_select is not None:
            self.on_venue_select(selection)
        return selection

    def markers(self) -> list[dict]:
        """Marker payloads for the map renderer."""
        return [
            {
                "group_id": g.group_id,
                "venue": g.venue,
                "address": g.address,
                "lat": g.lat,
                "lng": g.lng,
                "color": marker_color(g, self.show_filter).value,
                "badge": badge_text(g),
                "popup": popup_content(g),
            }
            for g in self.groups
        ]


def filter_geocoded(shows: Iterable[GeocodedShow], show_filter: ShowFilter) -> list[GeocodedShow]:
    if show_filter == ShowFilter.UPCOMING:
        return [s for s in shows if not s.is_past]
    if show_filter == ShowFilter.PAST:
        return [s for s in shows if s.is_past]
    return list(shows)
