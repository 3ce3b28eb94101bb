import json
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

import showtracker.config as cfg_module
from showtracker import dates
from showtracker.address import parse_address
from showtracker.lineup import parse_lineup
from showtracker.maps import MapData
from showtracker.models import Show, ShowFilter
from showtracker.pagination import PAGE_SIZE
from showtracker.timezones import TimezoneConverter, display_time

_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def _show_to_dict(show: Show, today: date, converter: Optional[TimezoneConverter] = None) -> dict:
    """Serialise a Show to a plain dict for JSON embedding in the page."""
    return {
        **asdict(show),
        "date_display": dates.format_date(show.show_date),
        "show_times": [display_time(t, show.address, converter) for t in dates.parse_show_times(show.show_time)],
        "is_past": dates.is_past(show, today),
        "address_info": asdict(parse_address(show.address)),
        "lineup_entries": [asdict(e) for e in parse_lineup(show.lineup)],
    }


def _map_payload(map_data: Optional[MapData]) -> dict:
    if map_data is None:
        return {"available": False}
    return {
        "available": True,
        "failed_count": map_data.failed_count,
        "upcoming_count": map_data.upcoming_count,
        "past_count": map_data.past_count,
        "markers": {
            f.value: [
                {**marker, "popup": asdict(marker["popup"])}
                for marker in map_data.venue_map(f).markers()
            ]
            for f in ShowFilter
        },
    }


def build_payload(
    shows: list[Show],
    map_data: Optional[MapData],
    today: date,
    converter: Optional[TimezoneConverter] = None,
) -> dict:
    return {
        "today": today.isoformat(),
        "page_size": PAGE_SIZE,
        "upcoming": [_show_to_dict(s, today, converter) for s in dates.upcoming_shows(shows, today)],
        "past": [_show_to_dict(s, today, converter) for s in dates.past_shows(shows, today)],
        "map": _map_payload(map_data),
    }


def build_site(
    shows: list[Show],
    map_data: Optional[MapData],
    cfg: dict,
    output_dir: Path,
    today: Optional[date] = None,
    converter: Optional[TimezoneConverter] = None,
) -> None:
    site_cfg = cfg_module.get_site(cfg)
    base_url = site_cfg.get("base_url", "").rstrip("/")
    site_title = site_cfg.get("title", "Shows")
    today = today or date.today()

    output_dir.mkdir(parents=True, exist_ok=True)

    payload = build_payload(shows, map_data, today, converter)
    shows_json = json.dumps(payload, ensure_ascii=False)
    (output_dir / "shows.json").write_text(shows_json, encoding="utf-8")

    env = Environment(
        loader=FileSystemLoader(_TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
    )
    env.globals["base_url"] = base_url
    env.globals["site_title"] = site_title
    env.globals["generated_date"] = today.isoformat()

    _render(env, "index.html", output_dir / "index.html", {
        "upcoming": payload["upcoming"][:PAGE_SIZE],
        "upcoming_total": len(payload["upcoming"]),
        "past_total": len(payload["past"]),
        "shows_json": shows_json.replace("</", "<\\/"),
        "page_title": site_title,
    })


def _render(env: Environment, template_name: str, dest: Path, context: dict) -> None:
    template = env.get_template(template_name)
    dest.write_text(template.render(**context), encoding="utf-8")
