from abc import ABC, abstractmethod
from typing import Optional

from showtracker.models import Coordinates

DEFAULT_TIMEOUT = 10


class Geocoder(ABC):
    def __init__(self, geocoding_cfg: dict):
        """
        Args:
            geocoding_cfg: The [geocoding] section from config.toml merged with
                           any secrets the geocoder needs (e.g. 'token').
        """
        self.geocoding_cfg = geocoding_cfg

    @abstractmethod
    def geocode(self, address: str, timeout: float = DEFAULT_TIMEOUT) -> Optional[Coordinates]:
        """Return coordinates for ``address``, or None. Must not raise."""
        ...
