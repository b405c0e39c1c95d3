"""Pydantic v2 configuration schema for the weather widget."""

import re
from datetime import timedelta
from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, SecretStr, field_validator

from glassweather.config.defaults import (
    DEFAULT_FORECAST_DAYS,
    DEFAULT_INTERVAL,
    DEFAULT_TIMEOUT,
    OWM_BASE_URL,
)

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_DURATION_UNITS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


def parse_duration(value: str) -> timedelta:
    """Parse a compact duration such as ``30m``, ``1h30m`` or ``90s``."""
    text = value.strip()
    if not text or _DURATION_PART.sub("", text):
        raise ValueError(f"invalid duration: {value!r}")
    seconds = sum(
        float(amount) * _DURATION_UNITS[unit]
        for amount, unit in _DURATION_PART.findall(text)
    )
    return timedelta(seconds=seconds)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}

    location_id: str = Field(alias="locationId", min_length=1)
    app_id: SecretStr = Field(alias="appId")
    units: Units
    interval: timedelta = DEFAULT_INTERVAL
    base_url: str = Field(default=OWM_BASE_URL, alias="baseUrl")
    forecast_days: int = Field(
        default=DEFAULT_FORECAST_DAYS, alias="forecastDays", ge=2, le=16
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)
    timezone: str | None = None

    @field_validator("app_id")
    @classmethod
    def _app_id_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("appId must not be empty")
        return v

    @field_validator("interval", mode="before")
    @classmethod
    def _parse_interval(cls, v):
        # ISO-8601 strings start with "P"; leave those to pydantic
        if isinstance(v, str) and not v.upper().startswith("P"):
            return parse_duration(v)
        return v

    @field_validator("interval")
    @classmethod
    def _interval_positive(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("interval must be positive")
        return v

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v}") from e
        return v

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Zone used for weekday labels; ``None`` means host local time."""
        return ZoneInfo(self.timezone) if self.timezone else None
