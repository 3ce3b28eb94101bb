from datetime import date

import pytest

from showtracker.dates import (
    format_date,
    is_launched,
    is_past,
    parse_date,
    parse_show_times,
    past_shows,
    upcoming_shows,
    venue_order,
)
from showtracker.models import Show

TODAY = date(2026, 3, 10)


def test_parse_date():
    assert parse_date("3/10/2026") == date(2026, 3, 10)
    assert parse_date("03/09/2026") == date(2026, 3, 9)


@pytest.mark.parametrize("value", ["", "3/10", "TBD", "13/01/2026", "2/30/2026", "a/b/c", "1/2/3/4",
     "+3/1/2026", " 3/ 1/2026", "1_0/1/2026", "\u0663/1/2026"])
def test_parse_date_malformed(value):
    assert parse_date(value) is None


def test_is_past_boundary():
    assert is_past(Show(show_date="3/9/2026"), TODAY)
    assert not is_past(Show(show_date="3/10/2026"), TODAY)
    assert not is_past(Show(show_date="3/11/2026"), TODAY)


def test_is_past_matches_strictly_earlier_dates():
    shows = [Show(show_date=f"{m}/{d}/2026") for m in (2, 3, 4) for d in (1, 9, 10, 11, 28)]
    for show in shows:
        assert is_past(show, TODAY) == (parse_date(show.show_date) < TODAY)


def test_unparsable_show_date_is_upcoming():
    show = Show(show_date="TBA")
    assert not is_past(show, TODAY)
    assert upcoming_shows([show], TODAY) == [show]


def test_launch_date():
    assert is_launched(Show(launch_date=""), TODAY)
    assert is_launched(Show(launch_date="3/10/2026"), TODAY)
    assert is_launched(Show(launch_date="1/1/2026"), TODAY)
    assert not is_launched(Show(launch_date="3/11/2026"), TODAY)
    # Unreadable launch dates do not hide the show
    assert is_launched(Show(launch_date="soon"), TODAY)


def test_bucket_ordering_and_visibility():
    a = Show(show_date="4/1/2026", group="a")
    b = Show(show_date="3/10/2026", group="b")
    c = Show(show_date="2/1/2026", group="c")
    d = Show(show_date="3/1/2026", group="d")
    hidden = Show(launch_date="12/1/2026", show_date="3/20/2026", group="hidden")
    shows = [a, b, c, d, hidden]

    assert upcoming_shows(shows, TODAY) == [b, a]
    assert past_shows(shows, TODAY) == [d, c]


def test_venue_order():
    shows = [
        Show(show_date="1/5/2026", group="old"),
        Show(show_date="5/1/2026", group="later"),
        Show(show_date="2/5/2026", group="recent"),
        Show(show_date="3/12/2026", group="soon"),
    ]
    assert [s.group for s in venue_order(shows, TODAY)] == ["soon", "later", "recent", "old"]


def test_parse_show_times():
    assert parse_show_times("7:00pm, 9:30pm,") == ["7:00pm", "9:30pm"]
    assert parse_show_times("8pm") == ["8pm"]
    assert parse_show_times("") == []


def test_format_date():
    assert format_date("10/2/2026") == "Friday, October 2, 2026"
    assert format_date("not a date") == "not a date"
