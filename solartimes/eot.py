"""Equation of time (Meeus 28.3)."""

from __future__ import annotations

import numpy as np

from .position import corrected_obliquity, eccentricity, mean_anomaly, mean_longitude
from .timescale import FloatOrArray
from .trig import tand

__all__ = ["MINUTES_PER_DEGREE", "equation_of_time"]

# 360 degrees of hour angle = 1440 minutes of time.
MINUTES_PER_DEGREE = 4.0


def equation_of_time(t: FloatOrArray) -> FloatOrArray:
    """Apparent minus mean solar time, in minutes, at century time *t*.

    Positive values mean the sundial is ahead of the clock. Stays within
    roughly -14.5 and +16.5 minutes over a year.
    """

    y = tand(corrected_obliquity(t) / 2.0) ** 2
    l0 = np.radians(mean_longitude(t))
    e = eccentricity(t)
    m = np.radians(mean_anomaly(t))

    sin_m = np.sin(m)
    e_rad = (
        y * np.sin(2.0 * l0)
        - 2.0 * e * sin_m
        + 4.0 * e * y * sin_m * np.cos(2.0 * l0)
        - 0.5 * y * y * np.sin(4.0 * l0)
        - 1.25 * e * e * np.sin(2.0 * m)
    )
    return MINUTES_PER_DEGREE * np.degrees(e_rad)
