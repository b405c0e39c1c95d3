"""OpenWeatherMap condition code to weather-icon CSS class lookup."""

from collections.abc import Sequence
from types import MappingProxyType

from glassweather.models.weather import Condition

UNKNOWN_ICON = "wu-unknown"

ICON_TABLE: MappingProxyType[str, str] = MappingProxyType({
    "01d": "wu-clear",
    "02d": "wu-partlycloudy",
    "03d": "wu-cloudy",
    "04d": "wu-cloudy",
    "09d": "wu-flurries",
    "10d": "wu-rain",
    "11d": "wu-tstorms",
    "13d": "wu-snow",
    "50d": "wu-fog",
    "01n": "wu-clear wu-night",
    "02n": "wu-partlycloudy wu-night",
    "03n": "wu-cloudy wu-night",
    "04n": "wu-cloudy wu-night",
    "09n": "wu-flurries wu-night",
    "10n": "wu-rain wu-night",
    "11n": "wu-tstorms wu-night",
    "13n": "wu-snow wu-night",
    "50n": "wu-fog wu-night",
})


def resolve_icon(code: str) -> str:
    """Return the icon class for a condition code, or the unknown icon."""
    return ICON_TABLE.get(code, UNKNOWN_ICON)


def icon_for(conditions: Sequence[Condition]) -> str:
    if not conditions:
        return UNKNOWN_ICON
    return resolve_icon(conditions[0].icon_code)
