import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional

from showtracker.geocoding.base import DEFAULT_TIMEOUT, Geocoder
from showtracker.models import Coordinates

log = logging.getLogger(__name__)


def geocode_batch(
    addresses: Iterable[str],
    geocoder: Geocoder,
    timeout: float = DEFAULT_TIMEOUT,
    max_workers: int = 8,
) -> dict[str, Optional[Coordinates]]:
    """Geocode each unique address once, concurrently.

    Every address ends up in the result; failures map to None and never
    fail the batch. Completion order is not preserved.
    """
    unique = list(dict.fromkeys(addresses))
    results: dict[str, Optional[Coordinates]] = {}
    if not unique:
        return results

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        future_map = {pool.submit(geocoder.geocode, address, timeout): address for address in unique}
        for future in as_completed(future_map):
            address = future_map[future]
            try:
                results[address] = future.result()
            except Exception as exc:
                log.warning("Geocoder raised for %r: %s", address, exc)
                results[address] = None

    found = sum(1 for c in results.values() if c is not None)
    log.info("Geocoded %d of %d addresses", found, len(unique))
    return results
