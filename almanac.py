"""Print a Nautical-Almanac style table of twilight, sunrise and sunset times.

Usage:
    python almanac.py [--date YYYY-MM-DD] [--lat 52 --lat 40 ...] [--lon 0] [--format table|json]

Times are UTC at the given longitude (Greenwich by default), rounded to the
minute. ``N/A`` marks events that do not occur, or that fall on the
previous UTC day.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import UTC, date, datetime
from typing import Dict, List, Optional, Sequence, Tuple

from solartimes.events import ALMANAC_COLUMNS, SolarEvent, day_events
from solartimes.formatting import format_minutes
from solartimes.julian import julian_day_from_date
from solartimes.settings import configure_logging, load_settings

LOGGER = logging.getLogger("solartimes-almanac")

# Latitudes tabulated in the Nautical Almanac.
ALMANAC_LATITUDES: Tuple[float, ...] = (
    72.0, 70.0, 68.0, 66.0, 64.0, 62.0, 60.0, 58.0, 56.0, 54.0, 52.0, 50.0,
    45.0, 40.0, 35.0, 30.0, 20.0, 10.0, 0.0, -10.0, -20.0, -30.0, -35.0,
    -40.0, -45.0, -50.0, -52.0, -54.0, -56.0, -58.0, -60.0,
)

_HEADERS = ("Lat", "Naut", "Civil", "Rise", "Set", "Civil", "Naut")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Twilight, sunrise and sunset times (UTC) for a list of latitudes."
    )
    parser.add_argument("--date", type=_parse_date, default=None, help="YYYY-MM-DD (UTC date, default: today)")
    parser.add_argument(
        "--lat",
        type=float,
        action="append",
        default=None,
        help="latitude in degrees, north positive; repeat for several (default: almanac table)",
    )
    parser.add_argument("--lon", type=float, default=0.0, help="longitude in degrees, east positive")
    parser.add_argument("--format", choices=("table", "json"), default="table")
    return parser


def compute_table(
    day: date, latitudes: Sequence[float], longitude: float = 0.0
) -> List[Dict[str, SolarEvent]]:
    """One :func:`~solartimes.events.day_events` mapping per latitude."""

    jd = julian_day_from_date(day)
    return [day_events(jd, latitude, longitude) for latitude in latitudes]


def render_table(latitudes: Sequence[float], rows: Sequence[Dict[str, SolarEvent]]) -> str:
    lines = ["| " + " | ".join(f"{h:^5}" for h in _HEADERS) + " |"]
    lines.append("|" + "|".join("-------" for _ in _HEADERS) + "|")
    for latitude, events in zip(latitudes, rows):
        cells = [f"{latitude:+5.0f}"]
        cells.extend(format_minutes(events[name].minutes) for name, _, _ in ALMANAC_COLUMNS)
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


def render_json(day: date, latitudes: Sequence[float], rows: Sequence[Dict[str, SolarEvent]]) -> str:
    payload = {
        "date": day.isoformat(),
        "rows": [
            {
                "latitude": latitude,
                **{
                    name: {"minutes": event.minutes, "status": event.status}
                    for name, event in events.items()
                },
            }
            for latitude, events in zip(latitudes, rows)
        ],
    }
    return json.dumps(payload, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging(load_settings())
    args = build_parser().parse_args(argv)

    day = args.date or datetime.now(UTC).date()
    latitudes = tuple(args.lat) if args.lat else ALMANAC_LATITUDES
    rows = compute_table(day, latitudes, args.lon)
    LOGGER.debug(
        json.dumps({"event": "almanac", "date": day.isoformat(), "latitudes": len(latitudes)})
    )

    if args.format == "json":
        print(render_json(day, latitudes, rows))
    else:
        print(render_table(latitudes, rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
