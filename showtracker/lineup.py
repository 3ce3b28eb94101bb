"""
Lineup strings look like:

    Jane Doe (trumpet) @janedoe :: John Smith (drums) www.johnsmith.com

Each "::" segment is one performer: the first parenthesized text is the
instrument, the first @handle an Instagram account and the first URL-ish
token a website. Whatever is left is the name. Entries keep sheet order.
"""

import re

from showtracker.models import LineupEntry

SEPARATOR = "::"

WEBSITE_TLDS = (
    "com", "net", "org", "edu", "gov", "io", "co", "me", "info", "biz", "tv",
    "fm", "ly", "gg", "xyz", "dev", "app", "blog", "music", "band", "studio", "art",
)

_INSTRUMENT = re.compile(r"\(([^)]+)\)")
_HANDLE = re.compile(r"@(\w+)", re.ASCII)
_WEBSITE = re.compile(
    r"(https?://\S+|www\.\S+|\S+\.(?:" + "|".join(WEBSITE_TLDS) + r")\b\S*)",
    re.IGNORECASE | re.ASCII,
)
_SCHEME = re.compile(r"^https?://")

INSTAGRAM_URL = "https://www.instagram.com/{handle}"


def parse_entry(segment: str) -> LineupEntry | None:
    text = segment.strip()
    if not text:
        return None

    instrument = ""
    if m := _INSTRUMENT.search(text):
        instrument = m.group(1).strip()

    instagram_link = None
    if m := _HANDLE.search(text):
        instagram_link = INSTAGRAM_URL.format(handle=m.group(1))

    website_link = None
    if m := _WEBSITE.search(text):
        website = m.group(1)
        if not _SCHEME.match(website):
            website = "https://" + website
        website_link = website

    name = _INSTRUMENT.sub("", text)
    name = _HANDLE.sub("", name)
    name = _WEBSITE.sub("", name).strip()
    if not name:
        return None

    return LineupEntry(
        name=name,
        instrument=instrument,
        instagram_link=instagram_link,
        website_link=website_link,
    )


def parse_lineup(lineup: str) -> list[LineupEntry]:
    if not lineup:
        return []
    entries = (parse_entry(segment) for segment in lineup.split(SEPARATOR))
    return [e for e in entries if e is not None]
