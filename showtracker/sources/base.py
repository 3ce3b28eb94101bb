from abc import ABC, abstractmethod


class SourceError(Exception):
    """The row source is misconfigured or could not be read."""


class BaseSource(ABC):
    # Subclasses must set this to their key in SOURCES
    source_key: str = ""

    def __init__(self, source_cfg: dict):
        """
        Args:
            source_cfg: The [source] section from config.toml, plus any
                        secrets the source needs.
        """
        self.source_cfg = source_cfg

    @abstractmethod
    def fetch_rows(self) -> list[list[str]]:
        """Return the data rows (no header), one list of cell strings per show."""
        ...
