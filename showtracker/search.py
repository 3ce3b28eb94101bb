from typing import Iterable

from showtracker.address import parse_address
from showtracker.models import Show


def _search_fields(show: Show) -> tuple[str, ...]:
    info = parse_address(show.address)
    return (
        show.venue,
        show.address,
        info.city,
        info.state,
        show.group,
        show.lineup,
        show.show_type,
    )


def matches_search(show: Show, term: str) -> bool:
    """Case-insensitive substring match over the searchable fields of a show.

    Both the upcoming and past lists go through this one predicate.
    """
    if not term:
        return True
    needle = term.lower()
    return any(needle in value.lower() for value in _search_fields(show))


def filter_shows(shows: Iterable[Show], term: str) -> list[Show]:
    return [s for s in shows if matches_search(s, term)]


def search_exists_in(shows: Iterable[Show], term: str) -> bool:
    """True if a non-empty term matches anything in ``shows``."""
    if not term:
        return False
    return any(matches_search(s, term) for s in shows)
