"""Low precision geocentric position of the Sun (Meeus ch. 25, 22).

Every function takes the time ``t`` in Julian centuries since J2000.0 (see
:mod:`solartimes.timescale`) and returns degrees unless stated otherwise.
Results are not reduced to ``[0, 360)``. Floats and numpy arrays are both
accepted; arrays are evaluated element-wise.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .timescale import FloatOrArray
from .trig import asind, atan2d, cosd, sind

__all__ = [
    "SolarPositionSample",
    "mean_longitude",
    "mean_anomaly",
    "eccentricity",
    "equation_of_center",
    "true_longitude",
    "true_anomaly",
    "lunar_node_longitude",
    "apparent_longitude",
    "mean_obliquity",
    "corrected_obliquity",
    "right_ascension",
    "declination",
    "solar_position",
]

ABERRATION = 0.00569  # degrees
NUTATION_IN_LONGITUDE = 0.00478  # degrees, coefficient of sin(omega)
NUTATION_IN_OBLIQUITY = 0.00256  # degrees, coefficient of cos(omega)


@dataclass(frozen=True)
class SolarPositionSample:
    """All solar quantities for one instant, in degrees (eccentricity excepted)."""

    century_time: float
    mean_longitude: float
    mean_anomaly: float
    eccentricity: float
    equation_of_center: float
    true_longitude: float
    true_anomaly: float
    lunar_node_longitude: float
    apparent_longitude: float
    mean_obliquity: float
    corrected_obliquity: float
    right_ascension: float
    declination: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def mean_longitude(t: FloatOrArray) -> FloatOrArray:
    """Geometric mean longitude of the Sun, referred to the mean equinox of the date (25.2)."""

    return 280.46646 + t * (36000.76983 + t * 0.0003032)


def mean_anomaly(t: FloatOrArray) -> FloatOrArray:
    """Mean anomaly of the Sun (25.3)."""

    return 357.52911 + t * (35999.05029 - t * 0.0001537)


def eccentricity(t: FloatOrArray) -> FloatOrArray:
    """Eccentricity of the Earth's orbit, dimensionless (25.4)."""

    return 0.016708634 - t * (0.000042037 + t * 0.0000001267)


def equation_of_center(
    t: FloatOrArray, mean_anomaly_deg: Optional[FloatOrArray] = None
) -> FloatOrArray:
    """Sun's equation of the center.

    *mean_anomaly_deg* may be passed when the caller already holds it.
    """

    if mean_anomaly_deg is None:
        mean_anomaly_deg = mean_anomaly(t)
    m = mean_anomaly_deg
    return (
        (1.914602 - t * (0.004817 + t * 0.000014)) * sind(m)
        + (0.019993 - 0.000101 * t) * sind(2.0 * m)
        + 0.000289 * sind(3.0 * m)
    )


def true_longitude(t: FloatOrArray) -> FloatOrArray:
    return mean_longitude(t) + equation_of_center(t)


def true_anomaly(t: FloatOrArray) -> FloatOrArray:
    m = mean_anomaly(t)
    return m + equation_of_center(t, m)


def lunar_node_longitude(t: FloatOrArray) -> FloatOrArray:
    """Longitude of the Moon's ascending node, used for the nutation and aberration terms."""

    return 125.04 - 1934.136 * t


def _apparent_longitude(t: FloatOrArray, omega: FloatOrArray) -> FloatOrArray:
    return true_longitude(t) - ABERRATION - NUTATION_IN_LONGITUDE * sind(omega)


def apparent_longitude(t: FloatOrArray) -> FloatOrArray:
    """True longitude corrected for nutation and aberration."""

    return _apparent_longitude(t, lunar_node_longitude(t))


def mean_obliquity(t: FloatOrArray) -> FloatOrArray:
    """Mean obliquity of the ecliptic (22.2)."""

    arc_seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + arc_seconds / 60.0) / 60.0


def _corrected_obliquity(t: FloatOrArray, omega: FloatOrArray) -> FloatOrArray:
    return mean_obliquity(t) + NUTATION_IN_OBLIQUITY * cosd(omega)


def corrected_obliquity(t: FloatOrArray) -> FloatOrArray:
    """Obliquity corrected for the apparent position of the Sun (25.8)."""

    return _corrected_obliquity(t, lunar_node_longitude(t))


def right_ascension(t: FloatOrArray) -> FloatOrArray:
    """Apparent right ascension in degrees, in ``(-180, 180]`` (25.6)."""

    omega = lunar_node_longitude(t)
    epsilon = _corrected_obliquity(t, omega)
    lam = _apparent_longitude(t, omega)
    return atan2d(cosd(epsilon) * sind(lam), cosd(lam))


def declination(t: FloatOrArray) -> FloatOrArray:
    """Apparent declination in degrees (25.7)."""

    omega = lunar_node_longitude(t)
    epsilon = _corrected_obliquity(t, omega)
    lam = _apparent_longitude(t, omega)
    return asind(sind(epsilon) * sind(lam))


def solar_position(t: float) -> SolarPositionSample:
    """Evaluate the whole series once for a single instant."""

    l0 = mean_longitude(t)
    m = mean_anomaly(t)
    c = equation_of_center(t, m)
    omega = lunar_node_longitude(t)
    lam = l0 + c - ABERRATION - NUTATION_IN_LONGITUDE * sind(omega)
    epsilon0 = mean_obliquity(t)
    epsilon = epsilon0 + NUTATION_IN_OBLIQUITY * cosd(omega)

    return SolarPositionSample(
        century_time=float(t),
        mean_longitude=float(l0),
        mean_anomaly=float(m),
        eccentricity=float(eccentricity(t)),
        equation_of_center=float(c),
        true_longitude=float(l0 + c),
        true_anomaly=float(m + c),
        lunar_node_longitude=float(omega),
        apparent_longitude=float(lam),
        mean_obliquity=float(epsilon0),
        corrected_obliquity=float(epsilon),
        right_ascension=float(atan2d(cosd(epsilon) * sind(lam), cosd(lam))),
        declination=float(asind(sind(epsilon) * sind(lam))),
    )
