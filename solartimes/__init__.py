"""Sunrise, sunset and twilight times from low precision solar coordinates."""

from .eot import equation_of_time
from .events import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    RISE_OR_SET,
    ZENITH_ANGLES,
    SolarEvent,
    day_events,
    solve_event,
    solve_event_utc_minutes,
    zenith_angle,
)
from .geometry import hour_angle
from .julian import julian_day, julian_day_from_components
from .position import SolarPositionSample, declination, right_ascension, solar_position
from .timescale import julian_century, julian_day_from_century

__version__ = "1.0.0"

__all__ = [
    "ASTRONOMICAL_TWILIGHT",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "RISE_OR_SET",
    "ZENITH_ANGLES",
    "SolarEvent",
    "SolarPositionSample",
    "day_events",
    "declination",
    "equation_of_time",
    "hour_angle",
    "julian_century",
    "julian_day",
    "julian_day_from_century",
    "julian_day_from_components",
    "right_ascension",
    "solar_position",
    "solve_event",
    "solve_event_utc_minutes",
    "zenith_angle",
]
