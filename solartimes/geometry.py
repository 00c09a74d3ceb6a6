"""Hour angle of the Sun at a given zenith angle.

See the NOAA solar calculation notes
(https://gml.noaa.gov/grad/solcalc/solareqns.PDF).
"""

from __future__ import annotations

import math
from typing import Optional

from .trig import cosd, sind

__all__ = [
    "STATUS_OK",
    "STATUS_POLAR_DAY",
    "STATUS_POLAR_NIGHT",
    "STATUS_INDETERMINATE",
    "hour_angle_cosine",
    "hour_angle",
    "non_occurrence_status",
]

STATUS_OK = "ok"
STATUS_POLAR_DAY = "polar_day"
STATUS_POLAR_NIGHT = "polar_night"
STATUS_INDETERMINATE = "indeterminate"


def hour_angle_cosine(latitude: float, declination: float, zenith: float) -> float:
    """Cosine of the hour angle at which the Sun sits *zenith* degrees from the zenith.

    All arguments are in degrees. The result lies outside ``[-1, 1]`` when the
    Sun never reaches that zenith angle on the day.
    """

    return float(
        (cosd(zenith) - sind(latitude) * sind(declination))
        / (cosd(latitude) * cosd(declination))
    )


def hour_angle(latitude: float, declination: float, zenith: float) -> Optional[float]:
    """Hour angle in radians, or ``None`` when no such crossing exists."""

    cos_h = hour_angle_cosine(latitude, declination, zenith)
    if not -1.0 <= cos_h <= 1.0:
        return None
    return math.acos(cos_h)


def non_occurrence_status(cos_h: float) -> str:
    """Explain why :func:`hour_angle` found no crossing for *cos_h*."""

    if cos_h > 1.0:
        return STATUS_POLAR_NIGHT
    if cos_h < -1.0:
        return STATUS_POLAR_DAY
    return STATUS_INDETERMINATE
