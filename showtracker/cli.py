import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from showtracker import __version__
import showtracker.config as cfg_module
from showtracker.address import parse_address
from showtracker.dates import format_date, parse_date, visible_shows
from showtracker.generator.build import build_site
from showtracker.geocoding import GEOCODERS
from showtracker.maps import MapLoader
from showtracker.models import Show, ShowFilter
from showtracker.pagination import has_page_controls, total_pages
from showtracker.session import Session, View
from showtracker.sources import SOURCES, load_shows
from showtracker.venues import marker_color


def _load(cfg) -> list[Show]:
    source_cfg = cfg_module.get_source(cfg)
    source_type = source_cfg["type"]
    if source_type not in SOURCES:
        print(f"Error: unknown source type '{source_type}'.", file=sys.stderr)
        print(f"Available sources: {', '.join(sorted(SOURCES))}", file=sys.stderr)
        sys.exit(1)
    return load_shows(SOURCES[source_type](source_cfg))


def _map_loader(cfg) -> MapLoader:
    geo_cfg = cfg_module.get_geocoding(cfg)
    provider = geo_cfg["provider"]
    if provider not in GEOCODERS:
        print(f"Error: unknown geocoding provider '{provider}'.", file=sys.stderr)
        sys.exit(1)
    return MapLoader(
        GEOCODERS[provider](geo_cfg),
        timeout=geo_cfg["timeout"],
        max_workers=geo_cfg["max_workers"],
    )


def _line(show: Show) -> str:
    info = parse_address(show.address)
    where = ", ".join(p for p in (info.city, info.state) if p)
    return f"{format_date(show.show_date)}  {show.group} @ {show.venue}" + (f" ({where})" if where else "")


def _list(args, cfg, today):
    session = Session(_load(cfg), today)
    session.search_term = args.search or ""
    view = View.PAST if args.past else View.UPCOMING
    session.set_page(view, args.page)

    if view == View.UPCOMING:
        page, matched, other = session.upcoming_page(), session.filtered_upcoming(), session.search_also_in_past()
    else:
        page, matched, other = session.past_page(), session.filtered_past(), session.search_also_in_upcoming()

    if not page:
        print(f"No {view.value} shows found.")
    for show in page:
        print(_line(show))
    if has_page_controls(matched):
        print(f"\nPage {args.page} of {total_pages(matched)}")
    if other:
        print(f"'{session.search_term}' also matches {'past' if view == View.UPCOMING else 'upcoming'} shows.")


def _map(args, cfg, today):
    visible = visible_shows(_load(cfg), today)
    print(f"Geocoding {len(visible)} shows ...", end=" ", flush=True)
    data = _map_loader(cfg).load(visible, today)
    print("done.")

    show_filter = ShowFilter(args.filter)
    venue_map = data.venue_map(show_filter)
    print(f"Showing {len(venue_map.groups)} venues "
          f"({data.upcoming_count} upcoming, {data.past_count} past shows)")
    if data.failed_count:
        print(f"{data.failed_count} addresses could not be geocoded")
    for group in venue_map.groups:
        color = marker_color(group, show_filter)
        print(f"  [{color.name.lower():8}] {group.venue} ({len(group.shows)}) {group.lat:.4f},{group.lng:.4f}")


def _generate(args, cfg, today):
    site_cfg = cfg_module.get_site(cfg)
    output_dir = Path(site_cfg.get("output_dir", "output"))
    shows = _load(cfg)

    map_data = None
    try:
        map_data = _map_loader(cfg).load(visible_shows(shows, today), today)
    except Exception as exc:
        print(f"Map data FAILED ({exc}); building lists only.")

    build_site(shows, map_data, cfg, output_dir, today)
    print(f"Site generated in '{output_dir}/'.")


def _parse_today(value: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"expected MM/DD/YYYY, got '{value}'")
    return parsed


def main():
    parser = argparse.ArgumentParser(
        prog="st",
        description="Show listings from a spreadsheet",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default="config.toml", metavar="PATH",
        help="Path to config.toml (default: config.toml)",
    )
    parser.add_argument(
        "--today", type=_parse_today, metavar="MM/DD/YYYY",
        help="Classify shows relative to this date instead of today",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress and failures")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    sp_list = subparsers.add_parser("list", help="Print a page of upcoming or past shows")
    sp_list.add_argument("--past", action="store_true", help="List past shows instead of upcoming")
    sp_list.add_argument("--search", metavar="TERM", help="Only shows matching TERM")
    sp_list.add_argument("--page", type=int, default=1, metavar="N", help="Page number (default: 1)")

    # map
    sp_map = subparsers.add_parser("map", help="Geocode shows and print venue markers")
    sp_map.add_argument(
        "--filter", choices=[f.value for f in ShowFilter], default=ShowFilter.UPCOMING.value,
        help="Which shows to place on the map (default: upcoming)",
    )

    # generate
    subparsers.add_parser("generate", help="Generate the static website")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = cfg_module.load(Path(args.config))
    today = args.today or date.today()

    if args.command == "list":
        _list(args, cfg, today)
    elif args.command == "map":
        _map(args, cfg, today)
    elif args.command == "generate":
        _generate(args, cfg, today)


if __name__ == "__main__":
    main()
