"""Julian Day <-> Julian centuries since J2000.0 (Meeus 25.1)."""

from __future__ import annotations

from typing import Union

import numpy as np

__all__ = [
    "J2000",
    "DAYS_PER_CENTURY",
    "FloatOrArray",
    "julian_century",
    "julian_day_from_century",
]

J2000 = 2451545.0  # 2000-01-01 12:00
DAYS_PER_CENTURY = 36525.0

FloatOrArray = Union[float, np.ndarray]


def julian_century(jd: FloatOrArray) -> FloatOrArray:
    """Julian centuries elapsed since J2000.0."""

    return (jd - J2000) / DAYS_PER_CENTURY


def julian_day_from_century(t: FloatOrArray) -> FloatOrArray:
    return t * DAYS_PER_CENTURY + J2000
