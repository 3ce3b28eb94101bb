"""
Heuristic address parsing.

Addresses are free text typed into the sheet, usually comma separated, e.g.
"123 Main St, Brooklyn, NY 11201" or "10 Greek St, London W1D 4DH". The
parser walks the components left to right and, for each one, tries in order:

  1. a component that is only a US ZIP, preceded by a state component
     (only from the third component on)
  2. a US ZIP inside a component whose text before the ZIP ends in a state
  3. a UK postcode anywhere in the component

If no component matches, the last component is tried as a bare state, then as
a country. Failing all of that the whole string is returned as the city.
Reordering these rules changes results on ambiguous input.
"""

import re

from showtracker.models import AddressInfo

_STANDALONE_ZIP = re.compile(r"^(\d{5}(-\d{4})?)$", re.ASCII)
_EMBEDDED_ZIP = re.compile(r"\b(\d{5}(-\d{4})?)\b", re.ASCII)
_STATE = re.compile(r"^[A-Z]{2}$")
_TRAILING_STATE = re.compile(r"\b([A-Z]{2})\b$", re.ASCII)
_UK_POSTCODE = re.compile(r"\b([A-Z]{1,2}\d[A-Z\d]?\s*\d[A-Z]{2})\b", re.ASCII)
_COUNTRY_CODE = re.compile(r"^[A-Z]{2,3}$")
_COUNTRY_NAME = re.compile(r"^[A-Za-z\s]+$")
_NUMBER = re.compile(r"^\d+$", re.ASCII)

STREET_WORDS = frozenset({
    "n", "s", "e", "w", "north", "south", "east", "west",
    "street", "st", "avenue", "ave", "road", "rd", "blvd", "boulevard",
    "drive", "dr", "lane", "ln", "way", "place", "pl", "court", "ct",
    "circle", "cir",
})


def extract_city_from_part(part: str) -> str:
    """Strip a leading street number and street words from a component."""
    if not part:
        return ""

    city_words = []
    found_city = False
    for i, word in enumerate(part.split()):
        if i == 0 and _NUMBER.match(word):
            continue
        if not found_city and word.lower() in STREET_WORDS:
            continue
        found_city = True
        city_words.append(word)

    return " ".join(city_words) if city_words else part


def _match_part(parts: list[str], i: int, address: str) -> AddressInfo | None:
    part = parts[i]

    standalone = _STANDALONE_ZIP.match(part)
    if standalone and i >= 2 and _STATE.match(parts[i - 1]):
        return AddressInfo(
            full_address=address,
            city=extract_city_from_part(parts[i - 2]),
            state=parts[i - 1],
            zip=standalone.group(1),
            country="USA",
        )

    embedded = _EMBEDDED_ZIP.search(part)
    if embedded:
        before_zip = part.replace(embedded.group(0), "", 1).strip()
        state = _TRAILING_STATE.search(before_zip)
        if state and i > 0:
            return AddressInfo(
                full_address=address,
                city=extract_city_from_part(parts[i - 1]),
                state=state.group(1),
                zip=embedded.group(1),
                country="USA",
            )

    postcode = _UK_POSTCODE.search(part)
    if postcode:
        before_postcode = part.replace(postcode.group(0), "", 1).strip()
        city = before_postcode or (extract_city_from_part(parts[i - 1]) if i > 0 else "")
        return AddressInfo(full_address=address, city=city, state="", country="UK")

    return None


def parse_address(address: str) -> AddressInfo:
    """Split a free-text address into city, state, zip and country. Never raises."""
    if not address:
        return AddressInfo(full_address="", city="", state="", zip="", country="USA")

    parts = [p.strip() for p in address.strip().split(",")]
    parts = [p for p in parts if p]
    if not parts:
        return AddressInfo(full_address=address, city=address, country="USA")

    for i in range(len(parts)):
        info = _match_part(parts, i, address)
        if info is not None:
            return info

    last = parts[-1]

    if _STATE.match(last) and len(parts) >= 2:
        return AddressInfo(
            full_address=address,
            city=extract_city_from_part(parts[-2]),
            state=last,
            zip="",
            country="USA",
        )

    looks_like_country = _COUNTRY_CODE.match(last) or (len(last) > 3 and _COUNTRY_NAME.match(last))
    if looks_like_country and len(parts) >= 2:
        return AddressInfo(
            full_address=address,
            city=extract_city_from_part(parts[-2]),
            state="",
            country=last,
        )

    return AddressInfo(full_address=address, city=address, state="", country="USA")
