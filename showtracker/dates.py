"""
Date classification for shows.

Sheet dates are "M/D/YYYY" strings with no timezone; they are compared as
local calendar days against a reference ``today``. A date that cannot be
parsed never hides a show: it counts as launched and as upcoming.
"""

from datetime import date
from typing import Iterable, Optional

from showtracker.models import Show


def parse_date(value: str) -> Optional[date]:
    """Parse "M/D/YYYY" into a date, or return None if it is malformed."""
    parts = (value or "").strip().split("/")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        return None
    try:
        month, day, year = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def is_launched(show: Show, today: Optional[date] = None) -> bool:
    if not show.launch_date.strip():
        return True
    launch = parse_date(show.launch_date)
    if launch is None:
        return True
    return launch <= (today or date.today())


def is_past(show: Show, today: Optional[date] = None) -> bool:
    show_date = parse_date(show.show_date)
    if show_date is None:
        return False
    return show_date < (today or date.today())


def visible_shows(shows: Iterable[Show], today: Optional[date] = None) -> list[Show]:
    today = today or date.today()
    return [s for s in shows if is_launched(s, today)]


def _sort_date(show: Show) -> date:
    return parse_date(show.show_date) or date.max


def upcoming_shows(shows: Iterable[Show], today: Optional[date] = None) -> list[Show]:
    """Visible shows from today onwards, soonest first."""
    today = today or date.today()
    upcoming = [s for s in visible_shows(shows, today) if not is_past(s, today)]
    return sorted(upcoming, key=_sort_date)


def past_shows(shows: Iterable[Show], today: Optional[date] = None) -> list[Show]:
    """Visible shows before today, most recent first."""
    today = today or date.today()
    past = [s for s in visible_shows(shows, today) if is_past(s, today)]
    return sorted(past, key=_sort_date, reverse=True)


def venue_order(shows: Iterable[Show], today: Optional[date] = None) -> list[Show]:
    """Order for a venue's show list: upcoming ascending, then past descending."""
    today = today or date.today()
    shows = list(shows)
    upcoming = sorted((s for s in shows if not is_past(s, today)), key=_sort_date)
    past = sorted((s for s in shows if is_past(s, today)), key=_sort_date, reverse=True)
    return upcoming + past


def parse_show_times(value: str) -> list[str]:
    if not value:
        return []
    return [t.strip() for t in value.split(",") if t.strip()]


def format_date(value: str) -> str:
    """Long US form, e.g. "Friday, October 2, 2026"."""
    parsed = parse_date(value)
    if parsed is None:
        return value
    return f"{parsed:%A}, {parsed:%B} {parsed.day}, {parsed.year}"
