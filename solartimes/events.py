"""UTC times of sunrise, sunset and twilight for a day and latitude."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .eot import MINUTES_PER_DEGREE, equation_of_time
from .geometry import (
    STATUS_OK,
    hour_angle,
    hour_angle_cosine,
    non_occurrence_status,
)
from .julian import MINUTES_PER_DAY
from .position import declination
from .timescale import julian_century

__all__ = [
    "RISE_OR_SET",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "ZENITH_ANGLES",
    "ALMANAC_COLUMNS",
    "SolarEvent",
    "zenith_angle",
    "solve_event",
    "solve_event_utc_minutes",
    "day_events",
]

LOGGER = logging.getLogger(__name__)

RISE_OR_SET = 90.833  # 90°50': refraction plus solar semidiameter
CIVIL_TWILIGHT = 96.0
NAUTICAL_TWILIGHT = 102.0
ASTRONOMICAL_TWILIGHT = 108.0

ZENITH_ANGLES: Dict[str, float] = {
    "official": RISE_OR_SET,
    "civil": CIVIL_TWILIGHT,
    "nautical": NAUTICAL_TWILIGHT,
    "astronomical": ASTRONOMICAL_TWILIGHT,
}

# (column name, is_rise, zenith angle) in the order an almanac prints them.
ALMANAC_COLUMNS: Tuple[Tuple[str, bool, float], ...] = (
    ("nautical_dawn", True, NAUTICAL_TWILIGHT),
    ("civil_dawn", True, CIVIL_TWILIGHT),
    ("sunrise", True, RISE_OR_SET),
    ("sunset", False, RISE_OR_SET),
    ("civil_dusk", False, CIVIL_TWILIGHT),
    ("nautical_dusk", False, NAUTICAL_TWILIGHT),
)

_NOON_MINUTES = 720.0


@dataclass(frozen=True)
class SolarEvent:
    """Outcome of one event search.

    ``minutes`` counts UTC minutes from 0h of the requested day and is not
    wrapped: values below 0 or at/above 1440 fall on the neighbouring day.
    It is ``None`` whenever ``status`` is not ``"ok"``.
    """

    rise: bool
    zenith: float
    minutes: Optional[float]
    status: str

    @property
    def occurs(self) -> bool:
        return self.minutes is not None


def zenith_angle(twilight: str) -> float:
    """Zenith angle in degrees for a twilight name such as ``"civil"``."""

    try:
        return ZENITH_ANGLES[twilight]
    except KeyError as exc:
        raise ValueError(f"Unsupported twilight selector: {twilight}") from exc


def _single_pass(
    rise: bool, jd: float, latitude: float, zenith: float, longitude: float
) -> Tuple[Optional[float], float]:
    """One evaluation of the event time with the Sun taken at *jd*.

    Returns ``(minutes, cos_h)``; ``minutes`` is ``None`` when there is no
    crossing.
    """

    t = julian_century(jd)
    eot = float(equation_of_time(t))
    decl = float(declination(t))
    cos_h = hour_angle_cosine(latitude, decl, zenith)
    h = hour_angle(latitude, decl, zenith)
    if h is None:
        return None, cos_h
    if not rise:
        h = -h
    return _NOON_MINUTES - MINUTES_PER_DEGREE * (longitude + math.degrees(h)) - eot, cos_h


def solve_event(
    is_rise: bool,
    day: float,
    latitude: float,
    zenith: float,
    longitude: float = 0.0,
) -> SolarEvent:
    """Find the UTC time at which the Sun crosses *zenith* degrees.

    Parameters
    ----------
    is_rise:
        ``True`` for the morning crossing (sunrise, dawn), ``False`` for the
        evening one.
    day:
        Julian Day at 0h UTC of the date of interest.
    latitude:
        Geographic latitude in degrees, north positive.
    zenith:
        Zenith angle of the event in degrees, e.g. :data:`RISE_OR_SET`.
    longitude:
        Geographic longitude in degrees, east positive. The default of 0
        gives times for the Greenwich meridian, as tabulated in the
        Nautical Almanac.

    The first pass takes the Sun's declination and the equation of time at
    *day*; the second pass evaluates them again at the time found by the
    first pass and returns that estimate.
    """

    first, cos_h = _single_pass(is_rise, day, latitude, zenith, longitude)
    if first is not None:
        second, cos_h = _single_pass(
            is_rise, day + first / MINUTES_PER_DAY, latitude, zenith, longitude
        )
        if second is not None:
            return SolarEvent(rise=is_rise, zenith=zenith, minutes=second, status=STATUS_OK)

    status = non_occurrence_status(cos_h)
    LOGGER.debug(
        json.dumps(
            {
                "event": "no_crossing",
                "rise": is_rise,
                "jd": day,
                "lat": latitude,
                "zenith": zenith,
                "status": status,
            }
        )
    )
    return SolarEvent(rise=is_rise, zenith=zenith, minutes=None, status=status)


def solve_event_utc_minutes(
    is_rise: bool,
    day: float,
    latitude: float,
    zenith: float,
    longitude: float = 0.0,
) -> Optional[float]:
    """UTC minutes after 0h of *day* for the event, or ``None`` if it does not occur.

    See :func:`solve_event` for the meaning of the arguments.
    """

    return solve_event(is_rise, day, latitude, zenith, longitude).minutes


def day_events(day: float, latitude: float, longitude: float = 0.0) -> Dict[str, SolarEvent]:
    """All almanac events for one day, keyed by the names in :data:`ALMANAC_COLUMNS`."""

    return {
        name: solve_event(rise, day, latitude, zenith, longitude)
        for name, rise, zenith in ALMANAC_COLUMNS
    }
