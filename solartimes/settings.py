"""Environment-driven settings for the API and the almanac tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

__all__ = ["Settings", "load_settings", "configure_logging"]

LOG_LEVEL_ENV = "SOLARTIMES_LOG_LEVEL"
CORS_ORIGINS_ENV = "SOLARTIMES_CORS_ORIGINS"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS: Tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class Settings:
    log_level: int
    cors_origins: Tuple[str, ...]


def _parse_log_level(value: str) -> int:
    try:
        return logging.getLevelNamesMapping()[value.strip().upper()]
    except KeyError as exc:
        raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {value!r}") from exc


def load_settings() -> Settings:
    """Read settings from the process environment."""

    log_level = _parse_log_level(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))

    raw_origins = os.environ.get(CORS_ORIGINS_ENV)
    if raw_origins:
        origins = tuple(item.strip() for item in raw_origins.split(",") if item.strip())
    else:
        origins = DEFAULT_CORS_ORIGINS

    return Settings(log_level=log_level, cors_origins=origins or DEFAULT_CORS_ORIGINS)


def configure_logging(settings: Settings) -> None:
    """Install the one-JSON-object-per-line root handler used by the entry points."""

    logging.basicConfig(level=settings.log_level, format="%(message)s")
