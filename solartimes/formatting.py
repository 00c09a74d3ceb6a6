"""Display helpers for event times and angles."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta
from typing import Optional, Tuple

__all__ = [
    "NOT_AVAILABLE",
    "format_minutes",
    "degrees_to_dms",
    "normalize_degrees",
    "minutes_to_datetime",
]

NOT_AVAILABLE = " N/A "


def format_minutes(minutes: Optional[float]) -> str:
    """Render minutes of the day as ``"HH MM"``.

    Missing events and negative values (previous day) print as ``" N/A "``.
    """

    if minutes is None or math.isnan(minutes) or minutes < 0:
        return NOT_AVAILABLE
    whole = int(round(minutes))
    hours, mins = divmod(whole, 60)
    return f"{hours:02d} {mins:02d}"


def degrees_to_dms(value: float) -> Tuple[int, int, float]:
    """Split decimal degrees into degrees, minutes and seconds.

    Seconds are truncated to the millisecond. The sign is carried by every
    component of a negative angle.
    """

    degrees = math.trunc(value)
    milliseconds = int((value - degrees) * (3600 * 1000))
    minutes = int(milliseconds / (60 * 1000))
    milliseconds -= minutes * 60 * 1000
    return degrees, minutes, milliseconds / 1000.0


def normalize_degrees(value: float) -> float:
    """Reduce an angle to ``[0, 360)``."""

    result = value % 360.0
    # -1e-20 % 360.0 rounds up to 360.0
    return 0.0 if result == 360.0 else result


def minutes_to_datetime(day: date, minutes: Optional[float]) -> Optional[datetime]:
    """UTC instant *minutes* after 0h of *day*.

    Values outside ``[0, 1440)`` land on the neighbouring day. Returns
    ``None`` when that day lies outside the years 1 to 9999.
    """

    if minutes is None:
        return None
    midnight = datetime.combine(day, datetime.min.time(), tzinfo=UTC)
    try:
        return midnight + timedelta(minutes=minutes)
    except OverflowError:
        return None
