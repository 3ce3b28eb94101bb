"""
Spreadsheet rows to Show records.

Rows are positional, one per show, in sheet column order A..L:

    launch_date, show_date, show_time, venue, address, group, ticket_url,
    show_type, show_description, lineup, show_image, livestream_ticket_url

The Sheets API drops empty trailing cells, so short rows are normal.
"""

from dataclasses import fields
from typing import Any, Iterable, Sequence

from showtracker.models import Show

ROW_FIELDS = tuple(f.name for f in fields(Show))[:12]

# Shown when the row source cannot be reached so the views still render.
PLACEHOLDER_SHOW = Show(
    show_date="09/15/2025",
    show_time="8:00pm",
    venue="Test Venue (API Error)",
    address="New York, NY",
    group="Test Group",
    show_type="Concert",
    show_description="This is mock data - check the logs for source errors",
)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def row_to_show(row: Sequence[Any]) -> Show:
    values = {name: _cell(row[i]) if i < len(row) else "" for i, name in enumerate(ROW_FIELDS)}
    return Show(**values)


def rows_to_shows(rows: Iterable[Sequence[Any]]) -> list[Show]:
    return [row_to_show(row) for row in rows]
