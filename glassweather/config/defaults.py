"""Provider endpoints and default widget settings."""

from datetime import timedelta

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5/"
CURRENT_PATH = "weather"
FORECAST_PATH = "forecast/daily"

DEFAULT_INTERVAL = timedelta(minutes=30)
DEFAULT_FORECAST_DAYS = 4
DEFAULT_TIMEOUT = 10.0  # seconds per request

APP_ID_ENV = "GLASSWEATHER_APP_ID"
DEFAULT_CONFIG = "config.yaml"
DEFAULT_OUTPUT = "weather.html"
