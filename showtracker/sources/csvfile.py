"""Rows from a CSV export of the sheet (File > Download > CSV)."""

import csv
from pathlib import Path

from showtracker.sources.base import BaseSource, SourceError


class CsvSource(BaseSource):
    source_key = "csv"

    def __init__(self, source_cfg: dict):
        super().__init__(source_cfg)
        self.path = Path(source_cfg.get("path", "data/shows.csv"))
        self.skip_header = source_cfg.get("skip_header", True)

    def fetch_rows(self) -> list[list[str]]:
        try:
            with open(self.path, newline="", encoding="utf-8") as f:
                rows = list(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise SourceError(f"Cannot read {self.path}: {exc}") from exc

        if self.skip_header and rows:
            rows = rows[1:]
        # Blank lines in the export are not shows
        return [row for row in rows if any(cell.strip() for cell in row)]
