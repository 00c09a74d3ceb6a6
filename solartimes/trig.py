"""Trigonometric functions taking or returning degrees."""

from __future__ import annotations

import numpy as np

from .timescale import FloatOrArray

__all__ = ["sind", "cosd", "tand", "asind", "atan2d"]


def sind(x: FloatOrArray) -> FloatOrArray:
    return np.sin(np.radians(x))


def cosd(x: FloatOrArray) -> FloatOrArray:
    return np.cos(np.radians(x))


def tand(x: FloatOrArray) -> FloatOrArray:
    return np.tan(np.radians(x))


def asind(x: FloatOrArray) -> FloatOrArray:
    return np.degrees(np.arcsin(x))


def atan2d(y: FloatOrArray, x: FloatOrArray) -> FloatOrArray:
    """Quadrant-preserving arctangent of ``y / x`` in degrees."""

    return np.degrees(np.arctan2(y, x))
