"""Pydantic models for API requests and responses."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Twilight(str, Enum):
    """Enumeration of supported twilight definitions."""

    official = "official"
    civil = "civil"
    nautical = "nautical"
    astronomical = "astronomical"


class SunQueryParams(BaseModel):
    """Validated query parameters for the ``/sun`` endpoint."""

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(
        0.0,
        ge=-180.0,
        le=180.0,
        description="Longitude in degrees, east positive (0 = Greenwich meridian)",
    )
    date: dt.date = Field(..., description="UTC calendar date (YYYY-MM-DD)")
    twilight: Twilight = Field(Twilight.official, description="Twilight definition")


class PositionQueryParams(BaseModel):
    """Validated query parameters for the ``/position`` endpoint."""

    datetime: dt.datetime = Field(
        ..., description="UTC instant (ISO-8601, timezone required)"
    )

    @field_validator("datetime")
    def validate_datetime(cls, value: dt.datetime) -> dt.datetime:
        if value.tzinfo is None:
            raise ValueError("datetime must include a timezone offset")
        return value


class SunResponse(BaseModel):
    """Successful sunrise/sunset response payload."""

    ok: bool = True
    status: str = Field(..., description="Computation status")
    date_utc: dt.date = Field(..., description="Requested UTC date")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    twilight: Twilight = Field(..., description="Applied twilight definition")
    zenith_deg: float = Field(..., description="Zenith angle of the event in degrees")
    sunrise_minutes: Optional[float] = Field(
        None, description="Minutes after 0h UTC of the requested date"
    )
    sunset_minutes: Optional[float] = Field(
        None, description="Minutes after 0h UTC of the requested date"
    )
    sunrise_utc: Optional[str] = Field(
        None, description="Sunrise time in UTC (ISO-8601), null outside years 1-9999"
    )
    sunset_utc: Optional[str] = Field(
        None, description="Sunset time in UTC (ISO-8601), null outside years 1-9999"
    )
    sunrise_hhmm: str = Field(..., description="Sunrise as 'HH MM' or ' N/A '")
    sunset_hhmm: str = Field(..., description="Sunset as 'HH MM' or ' N/A '")


class PositionResponse(BaseModel):
    """Solar coordinates for one instant, angles in degrees."""

    ok: bool = True
    datetime_utc: str
    julian_day: float
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
    equation_of_time_minutes: float


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    version: str
    twilights: List[str]


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
