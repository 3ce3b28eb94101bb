"""
Show times are entered in the venue's local time. Converting them for a
viewer in another timezone is left to a TimezoneConverter; the default one
performs no conversion.
"""

from abc import ABC, abstractmethod
from typing import Optional


class TimezoneConverter(ABC):
    @abstractmethod
    def convert(self, show_time: str, address: str) -> Optional[str]:
        """Return ``show_time`` rendered in the viewer's timezone, or None if unchanged."""
        ...


class LocalTimezoneConverter(TimezoneConverter):
    def convert(self, show_time: str, address: str) -> Optional[str]:
        return None


def display_time(show_time: str, address: str, converter: Optional[TimezoneConverter] = None) -> str:
    converter = converter or LocalTimezoneConverter()
    return converter.convert(show_time, address) or show_time
