"""FastAPI application exposing sunrise, sunset and solar position computations."""

from __future__ import annotations

import json
import logging
import time
from datetime import UTC, datetime
from typing import Annotated, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from models import (
    ErrorResponse,
    HealthResponse,
    PositionQueryParams,
    PositionResponse,
    SunQueryParams,
    SunResponse,
)
from solartimes import __version__
from solartimes.eot import equation_of_time
from solartimes.events import ZENITH_ANGLES, solve_event, zenith_angle
from solartimes.formatting import format_minutes, minutes_to_datetime
from solartimes.julian import julian_day_from_date, julian_day_from_datetime
from solartimes.position import solar_position
from solartimes.settings import configure_logging, load_settings
from solartimes.timescale import julian_century

SETTINGS = load_settings()
configure_logging(SETTINGS)
LOGGER = logging.getLogger("sunrise-api")

APP_DESCRIPTION = (
    "Sunrise, sunset and twilight times from the low precision solar "
    "coordinates of Meeus, Astronomical Algorithms"
)

app = FastAPI(
    title="Solartimes API",
    description=APP_DESCRIPTION,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _format_utc(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Starlette raises this for unknown routes (404) and methods (405).
    return _error_response(exc.status_code, f"http_{exc.status_code}", str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, version=__version__, twilights=list(ZENITH_ANGLES))


@app.get(
    "/sun",
    response_model=SunResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def sun_endpoint(params: Annotated[SunQueryParams, Query()]) -> SunResponse:
    start_time = time.perf_counter()
    zenith = zenith_angle(params.twilight.value)
    jd = julian_day_from_date(params.date)
    rise = solve_event(True, jd, params.lat, zenith, params.lon)
    set_ = solve_event(False, jd, params.lat, zenith, params.lon)
    # A missing rise and a missing set share the same cause.
    status = rise.status if not rise.occurs else set_.status

    duration_ms = (time.perf_counter() - start_time) * 1000.0

    response = SunResponse(
        status=status,
        date_utc=params.date,
        latitude=params.lat,
        longitude=params.lon,
        twilight=params.twilight,
        zenith_deg=zenith,
        sunrise_minutes=rise.minutes,
        sunset_minutes=set_.minutes,
        sunrise_utc=_format_utc(minutes_to_datetime(params.date, rise.minutes)),
        sunset_utc=_format_utc(minutes_to_datetime(params.date, set_.minutes)),
        sunrise_hhmm=format_minutes(rise.minutes),
        sunset_hhmm=format_minutes(set_.minutes),
    )

    LOGGER.info(
        json.dumps(
            {
                "event": "sun",
                "lat": params.lat,
                "lon": params.lon,
                "date": params.date.isoformat(),
                "twilight": params.twilight.value,
                "status": response.status,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response


@app.get(
    "/position",
    response_model=PositionResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def position_endpoint(params: Annotated[PositionQueryParams, Query()]) -> PositionResponse:
    jd = julian_day_from_datetime(params.datetime)
    t = julian_century(jd)
    sample = solar_position(t)

    LOGGER.info(json.dumps({"event": "position", "jd": jd}))
    return PositionResponse(
        datetime_utc=_format_utc(params.datetime),
        julian_day=jd,
        equation_of_time_minutes=float(equation_of_time(t)),
        **sample.as_dict(),
    )
