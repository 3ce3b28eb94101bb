"""
In-memory view state for one browsing session.

Holds the loaded shows, the search term, the two page counters and which
show or venue is open. Everything shown is derived from that state on
demand; nothing here is persisted.
"""

from dataclasses import replace
from datetime import date
from enum import Enum
from typing import Optional

from showtracker import dates
from showtracker.models import Show, ShowFilter, VenueSelection
from showtracker.pagination import PageState, paginate, total_pages
from showtracker.search import filter_shows, search_exists_in


class View(str, Enum):
    UPCOMING = "upcoming"
    PAST = "past"
    MAP = "map"


class Session:
    def __init__(self, shows: list[Show], today: Optional[date] = None):
        self.shows = list(shows)
        self.today = today or date.today()
        self.pages = PageState()
        self._search_term = ""

        self.selected_show: Optional[Show] = None
        # Venue the open show was picked from, for "back to venue"
        self.show_origin: Optional[VenueSelection] = None
        self.selected_venue: Optional[VenueSelection] = None
        self.venue_filter = ShowFilter.UPCOMING

    # --- Search and lists ---

    @property
    def search_term(self) -> str:
        return self._search_term

    @search_term.setter
    def search_term(self, term: str) -> None:
        if term != self._search_term:
            self.pages.reset()
        self._search_term = term

    def upcoming(self) -> list[Show]:
        return dates.upcoming_shows(self.shows, self.today)

    def past(self) -> list[Show]:
        return dates.past_shows(self.shows, self.today)

    def filtered_upcoming(self) -> list[Show]:
        return filter_shows(self.upcoming(), self._search_term)

    def filtered_past(self) -> list[Show]:
        return filter_shows(self.past(), self._search_term)

    def upcoming_page(self) -> list[Show]:
        return paginate(self.filtered_upcoming(), self.pages.upcoming)

    def past_page(self) -> list[Show]:
        return paginate(self.filtered_past(), self.pages.past)

    def upcoming_total_pages(self) -> int:
        return total_pages(self.filtered_upcoming())

    def past_total_pages(self) -> int:
        return total_pages(self.filtered_past())

    def set_page(self, view: View, page: int) -> None:
        if view == View.UPCOMING:
            self.pages.upcoming = page
        elif view == View.PAST:
            self.pages.past = page
        else:
            raise ValueError(f"View {view.value!r} is not paginated")

    def search_also_in_past(self) -> bool:
        return search_exists_in(self.past(), self._search_term)

    def search_also_in_upcoming(self) -> bool:
        return search_exists_in(self.upcoming(), self._search_term)

    # --- Selection ---

    def select_show(self, show: Show) -> None:
        self.selected_show = show
        self.show_origin = None

    def open_venue(self, selection: VenueSelection) -> None:
        self.selected_venue = selection
        self.venue_filter = selection.default_filter

    def select_show_from_venue(self, show: Show) -> None:
        """Open a show from the venue list without closing the venue."""
        if self.selected_venue is None:
            raise ValueError("No venue is open")
        self.selected_show = show
        self.show_origin = replace(self.selected_venue, default_filter=self.venue_filter)

    def can_go_back_to_venue(self) -> bool:
        return self.show_origin is not None and len(self.show_origin.shows) > 1

    def back_to_venue(self) -> None:
        origin = self.show_origin
        self.selected_show = None
        self.show_origin = None
        if origin is not None and self.selected_venue is None:
            self.open_venue(origin)

    def close_show(self) -> None:
        self.selected_show = None
        self.show_origin = None

    def close_venue(self) -> None:
        self.selected_venue = None
        self.close_show()

    def venue_shows(self) -> list[Show]:
        """Shows of the open venue under the venue filter, upcoming first."""
        if self.selected_venue is None:
            return []
        shows = self.selected_venue.shows
        if self.venue_filter == ShowFilter.UPCOMING:
            shows = [s for s in shows if not dates.is_past(s, self.today)]
        elif self.venue_filter == ShowFilter.PAST:
            shows = [s for s in shows if dates.is_past(s, self.today)]
        return dates.venue_order(shows, self.today)
