"""Calendar date to Julian Day conversion (Meeus, *Astronomical Algorithms*, ch. 7)."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime
from typing import Tuple

__all__ = [
    "GREGORIAN_START",
    "julian_day",
    "julian_day_from_components",
    "julian_day_from_datetime",
    "julian_day_from_date",
    "calendar_from_julian_day",
    "is_leap_year",
    "day_of_year",
]

MINUTES_PER_DAY = 1440.0
SECONDS_PER_DAY = 86400.0

# First day of the Gregorian calendar, as (year, month, day).
GREGORIAN_START: Tuple[int, int, float] = (1582, 10, 15.0)

# Julian Day number of 1582-10-15 (the first integral JD on the Gregorian side).
_GREGORIAN_START_JD = 2299161


def _is_gregorian(year: int, month: int, day_fraction: float) -> bool:
    return (year, month, day_fraction) >= GREGORIAN_START


def julian_day(year: int, month: int, day_fraction: float) -> float:
    """Return the Julian Day for a calendar date (Meeus 7.1).

    Parameters
    ----------
    year:
        Astronomical year number (year 0 is 1 BC, negative years allowed).
    month:
        Month in ``1..12``.
    day_fraction:
        Day of the month with the time of day as a fractional part.

    Dates before 1582-10-15 are read in the proleptic Julian calendar, later
    ones in the Gregorian calendar. Out-of-range months or days are not
    rejected; they simply flow through the arithmetic.
    """

    gregorian = _is_gregorian(year, month, day_fraction)
    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4 if gregorian else 0

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day_fraction
        + b
        - 1524.5
    )


def julian_day_from_components(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0,
) -> float:
    """Julian Day for a date and a UTC time of day given as separate fields."""

    day_fraction = day + hour / 24.0 + minute / MINUTES_PER_DAY + second / SECONDS_PER_DAY
    return julian_day(year, month, day_fraction)


def julian_day_from_datetime(dt: datetime) -> float:
    """Convert a timezone-aware datetime into a Julian Day (UTC)."""

    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(UTC)
    return julian_day_from_components(
        dt_utc.year,
        dt_utc.month,
        dt_utc.day,
        dt_utc.hour,
        dt_utc.minute,
        dt_utc.second + dt_utc.microsecond / 1_000_000,
    )


def julian_day_from_date(value: date) -> float:
    """Julian Day at 0h UTC of *value*."""

    return julian_day(value.year, value.month, float(value.day))


def calendar_from_julian_day(jd: float) -> Tuple[int, int, float]:
    """Return ``(year, month, day_fraction)`` for a Julian Day (Meeus p.63).

    Not valid for negative Julian Days.
    """

    z = math.floor(jd + 0.5)
    f = (jd + 0.5) - z
    if z >= _GREGORIAN_START_JD:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        b = z + 1 + alpha - alpha // 4 + 1524
    else:
        b = z + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_of_year(jd: float) -> float:
    """Day of the year for *jd*, keeping the fractional part of the day (Meeus p.65)."""

    year, month, day = calendar_from_julian_day(jd)
    k = 1 if is_leap_year(year) else 2
    return math.floor(275 * month / 9) - k * math.floor((month + 9) / 12) + day - 30
