from datetime import date

import pytest

from showtracker.models import Show, ShowFilter, VenueSelection
from showtracker.session import Session, View

TODAY = date(2026, 3, 10)


def _shows(n_upcoming, n_past, venue="Club"):
    upcoming = [Show(show_date=f"4/{i % 28 + 1}/2026", venue=venue, group=f"up{i}") for i in range(n_upcoming)]
    past = [Show(show_date=f"2/{i % 28 + 1}/2026", venue=venue, group=f"past{i}") for i in range(n_past)]
    return upcoming + past


def test_pages_are_independent():
    session = Session(_shows(65, 40), TODAY)
    session.set_page(View.UPCOMING, 3)
    session.set_page(View.PAST, 2)

    assert session.upcoming_total_pages() == 3
    assert session.past_total_pages() == 2
    assert len(session.upcoming_page()) == 5
    assert len(session.past_page()) == 10


def test_changing_search_resets_both_pages():
    session = Session(_shows(65, 40), TODAY)
    session.set_page(View.UPCOMING, 3)
    session.set_page(View.PAST, 2)

    session.search_term = "club"

    assert (session.pages.upcoming, session.pages.past) == (1, 1)


def test_map_view_has_no_pages():
    with pytest.raises(ValueError):
        Session([], TODAY).set_page(View.MAP, 2)


def test_search_applies_to_both_buckets_and_hints_other_bucket():
    shows = _shows(3, 0, venue="Club") + [Show(show_date="1/1/2026", venue="Barn", group="old")]
    session = Session(shows, TODAY)
    session.search_term = "barn"

    assert session.filtered_upcoming() == []
    assert [s.group for s in session.filtered_past()] == ["old"]
    assert session.search_also_in_past()
    assert not session.search_also_in_upcoming()


def test_embargoed_shows_hidden():
    shows = [Show(launch_date="3/11/2026", show_date="4/1/2026"), Show(show_date="4/1/2026", group="open")]
    assert [s.group for s in Session(shows, TODAY).upcoming()] == ["open"]


def test_back_to_venue_restores_list_and_filter():
    shows = _shows(2, 2)
    session = Session(shows, TODAY)
    session.open_venue(VenueSelection(name="Club", shows=shows, default_filter=ShowFilter.PAST))
    assert session.venue_filter == ShowFilter.PAST
    assert [s.group for s in session.venue_shows()] == ["past1", "past0"]

    session.venue_filter = ShowFilter.ALL
    session.select_show_from_venue(shows[0])
    assert session.can_go_back_to_venue()

    # venue closed while the show is open, then "back"
    session.selected_venue = None
    session.back_to_venue()

    assert session.selected_show is None
    assert session.selected_venue.name == "Club"
    assert session.selected_venue.shows == shows
    assert session.venue_filter == ShowFilter.ALL
    assert [s.group for s in session.venue_shows()] == ["up0", "up1", "past1", "past0"]


def test_no_back_for_single_show_venue():
    show = Show(show_date="4/1/2026", venue="Solo")
    session = Session([show], TODAY)
    session.open_venue(VenueSelection(name="Solo", shows=[show]))
    session.select_show_from_venue(show)
    assert not session.can_go_back_to_venue()


def test_show_from_list_has_no_venue_origin():
    show = Show(show_date="4/1/2026")
    session = Session([show], TODAY)
    session.select_show(show)
    assert session.selected_show == show
    assert not session.can_go_back_to_venue()


def test_close_venue_closes_show():
    shows = _shows(2, 0)
    session = Session(shows, TODAY)
    session.open_venue(VenueSelection(name="Club", shows=shows))
    session.select_show_from_venue(shows[1])

    session.close_venue()

    assert session.selected_venue is None
    assert session.selected_show is None
