"""OpenWeatherMap API client.

One GET per call, no retries. The next scheduled pass is the retry.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from glassweather.config.defaults import CURRENT_PATH, DEFAULT_FORECAST_DAYS, FORECAST_PATH
from glassweather.config.schema import WidgetConfig
from glassweather.errors import ApiError, DecodeError, TransportError
from glassweather.models.payloads import ApiErrorPayload, CurrentPayload, ForecastPayload

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "glassweather/0.1.0"

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class OpenWeatherClient:
    def __init__(
        self,
        config: WidgetConfig,
        http: httpx.Client | None = None,
    ):
        self.config = config
        self.base_url = config.base_url
        self._owns_http = http is None
        self._http = http or httpx.Client(
            timeout=config.timeout,
            headers={"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"},
        )

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def base_params(self) -> dict[str, str]:
        return {
            "id": self.config.location_id,
            "appid": self.config.app_id.get_secret_value(),
            "units": self.config.units.value,
        }

    def get_current(self) -> CurrentPayload:
        """Fetch current conditions for the configured location."""
        return self.request(CURRENT_PATH, {}, CurrentPayload)

    def get_forecast(self, days: int = DEFAULT_FORECAST_DAYS) -> ForecastPayload:
        """Fetch the daily forecast, ``days`` entries including today."""
        return self.request(FORECAST_PATH, {"cnt": str(days)}, ForecastPayload)

    def request(
        self, path: str, extra_params: dict[str, str], model: type[PayloadT]
    ) -> PayloadT:
        body = self.fetch(path, extra_params)
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"could not parse {path} data: {e}", endpoint=path) from e

    def fetch(self, path: str, extra_params: dict[str, str]) -> bytes:
        """GET ``path`` and return the raw body of a 200 response.

        Call-specific params are merged over the base query. Non-200 replies
        raise ApiError when the error envelope decodes, DecodeError otherwise.
        The response body is always read to the end and released.
        """
        url = self.base_url + path
        params = {**self.base_params(), **extra_params}

        try:
            with self._http.stream("GET", url, params=params) as resp:
                body = resp.read()
                status = resp.status_code
        except httpx.RequestError as e:
            raise TransportError(f"could not request {path}: {e}", endpoint=path) from e

        logger.debug("GET %s -> %d (%d bytes)", path, status, len(body))

        if status != httpx.codes.OK:
            try:
                envelope = ApiErrorPayload.model_validate_json(body)
            except ValidationError as e:
                raise DecodeError(
                    f"could not parse {path} error (HTTP {status}): {e}",
                    endpoint=path,
                ) from e
            raise ApiError(
                envelope.message or f"HTTP {status}",
                code=envelope.cod,
                status_code=status,
                endpoint=path,
            )

        return body
