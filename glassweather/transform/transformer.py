"""Data transformer: raw provider payloads to a render-ready model."""

import logging
from datetime import datetime, tzinfo

from glassweather.models.payloads import (
    ConditionPayload,
    CurrentPayload,
    DayPayload,
    ForecastPayload,
)
from glassweather.models.weather import (
    Condition,
    CurrentReading,
    ForecastDay,
    ForecastSeries,
    RenderModel,
    WeatherCondition,
)
from glassweather.transform.icons import icon_for

logger = logging.getLogger(__name__)

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def weekday_label(unix: int, tz: tzinfo | None = None) -> str:
    """Full weekday name for a unix timestamp.

    With ``tz=None`` the host's local time zone is used. Names are fixed
    English strings, independent of the process locale.
    """
    try:
        moment = datetime.fromtimestamp(unix, tz)
    except (OverflowError, OSError, ValueError):
        logger.warning("Timestamp %d out of range, leaving weekday blank", unix)
        return ""
    return WEEKDAYS[moment.weekday()]


def transform(
    current: CurrentPayload,
    forecast: ForecastPayload,
    tz: tzinfo | None = None,
) -> RenderModel:
    """Build the RenderModel for one pass.

    When the forecast has more than one day, the first day is promoted into
    the current reading's ``today`` slot and dropped from the series. Shorter
    series are passed through untouched.
    """
    days = tuple(_to_forecast_day(d, tz) for d in forecast.days)
    today, series = reconcile(days)

    conditions = _conditions(current.weather)
    reading = CurrentReading(
        temp=current.main.temp,
        icon=icon_for(conditions),
        conditions=conditions,
        today=today,
    )
    logger.debug(
        "Transformed current=%s today=%s forecast=%d days",
        reading.icon, today.day if today else None, len(series),
    )
    return RenderModel(current=reading, forecast=series)


def reconcile(days: ForecastSeries) -> tuple[ForecastDay | None, ForecastSeries]:
    """Split off the current day from the forecast series."""
    if len(days) > 1:
        return days[0], days[1:]
    return None, days


def empty_model() -> RenderModel:
    """Model used before any data has been fetched."""
    return transform(CurrentPayload(), ForecastPayload())


def _to_forecast_day(raw: DayPayload, tz: tzinfo | None) -> ForecastDay:
    conditions = _conditions(raw.weather)
    return ForecastDay(
        unix=raw.dt,
        day=weekday_label(raw.dt, tz),
        temp_min=raw.temp.min,
        temp_max=raw.temp.max,
        icon=icon_for(conditions),
        rain=raw.rain or 0.0,
        conditions=conditions,
    )


def _conditions(raw: list[ConditionPayload]) -> WeatherCondition:
    return tuple(Condition(icon_code=c.icon) for c in raw)
