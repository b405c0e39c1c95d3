"""Render-ready weather models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Condition:
    icon_code: str = ""


# Only the first entry matters for icon derivation
WeatherCondition = tuple[Condition, ...]


@dataclass(frozen=True)
class ForecastDay:
    unix: int
    day: str  # full weekday name, e.g. "Monday"
    temp_min: float
    temp_max: float
    icon: str
    rain: float = 0.0
    conditions: WeatherCondition = ()


ForecastSeries = tuple[ForecastDay, ...]


@dataclass(frozen=True)
class CurrentReading:
    temp: float
    icon: str
    conditions: WeatherCondition = ()
    today: ForecastDay | None = None


@dataclass(frozen=True)
class RenderModel:
    current: CurrentReading
    forecast: ForecastSeries = ()
