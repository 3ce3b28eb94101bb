"""
Row source registry.

To add a new source:
1. Subclass BaseSource in its own module and set source_key
2. Implement fetch_rows()
3. Import and register it in the SOURCES dict below
"""

import logging

import requests

from showtracker.models import Show
from showtracker.rows import PLACEHOLDER_SHOW, rows_to_shows
from showtracker.sources.base import BaseSource, SourceError
from showtracker.sources.csvfile import CsvSource
from showtracker.sources.sheets import GoogleSheetsSource

log = logging.getLogger(__name__)

SOURCES: dict[str, type[BaseSource]] = {
    "sheets": GoogleSheetsSource,
    "csv": CsvSource,
}


def load_shows(source: BaseSource) -> list[Show]:
    """Fetch and normalize all rows, or the placeholder show if the source fails."""
    try:
        rows = source.fetch_rows()
    except (SourceError, requests.RequestException) as exc:
        log.error("Loading shows from %s failed: %s", source.source_key, exc)
        return [PLACEHOLDER_SHOW]
    shows = rows_to_shows(rows)
    log.info("Loaded %d shows from %s", len(shows), source.source_key)
    return shows


__all__ = ["SOURCES", "BaseSource", "CsvSource", "GoogleSheetsSource", "SourceError", "load_shows"]
