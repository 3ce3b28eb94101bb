"""
Google Sheets source.

Reads a range with the Sheets v4 values endpoint using an API key:
  GET https://sheets.googleapis.com/v4/spreadsheets/<id>/values/<range>?key=<key>

The default range "Sheet1!A2:L" skips the header row and covers the 12 show
columns. The response's "values" is omitted entirely when the range is empty.
"""

from urllib.parse import quote

import requests

from showtracker.sources.base import BaseSource, SourceError

_BASE = "https://sheets.googleapis.com/v4/spreadsheets"
_HEADERS = {"User-Agent": "showtracker/0.1"}
DEFAULT_RANGE = "Sheet1!A2:L"


class GoogleSheetsSource(BaseSource):
    source_key = "sheets"

    def __init__(self, source_cfg: dict):
        super().__init__(source_cfg)
        self.sheet_id = source_cfg.get("sheet_id", "")
        self.api_key = source_cfg.get("api_key", "")
        self.range = source_cfg.get("range", DEFAULT_RANGE)
        self.timeout = source_cfg.get("timeout", 15)

    def fetch_rows(self) -> list[list[str]]:
        if not self.sheet_id or not self.api_key:
            raise SourceError("GOOGLE_SHEETS_ID and GOOGLE_API_KEY must both be set")

        url = f"{_BASE}/{self.sheet_id}/values/{quote(self.range, safe='!:')}"
        r = requests.get(url, params={"key": self.api_key}, headers=_HEADERS, timeout=self.timeout)
        r.raise_for_status()
        try:
            data = r.json()
        except ValueError as exc:
            raise SourceError(f"Sheets API returned invalid JSON: {exc}") from exc
        return data.get("values", [])
