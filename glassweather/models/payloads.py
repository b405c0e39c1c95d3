"""OpenWeatherMap wire payloads.

Unknown keys are ignored and missing keys fall back to zero values, so only
bodies that are not JSON or carry type-incompatible values fail validation.
"""

from pydantic import BaseModel, Field


class ConditionPayload(BaseModel):
    model_config = {"extra": "ignore"}

    icon: str = ""


class MainPayload(BaseModel):
    model_config = {"extra": "ignore"}

    temp: float = 0.0


class CurrentPayload(BaseModel):
    model_config = {"extra": "ignore"}

    main: MainPayload = MainPayload()
    weather: list[ConditionPayload] = []


class TempRangePayload(BaseModel):
    model_config = {"extra": "ignore"}

    min: float = 0.0
    max: float = 0.0


class DayPayload(BaseModel):
    model_config = {"extra": "ignore"}

    dt: int = 0
    temp: TempRangePayload = TempRangePayload()
    weather: list[ConditionPayload] = []
    rain: float | None = None  # only present on days with precipitation


class ForecastPayload(BaseModel):
    model_config = {"extra": "ignore", "populate_by_name": True}

    days: list[DayPayload] = Field(default_factory=list, alias="list")


class ApiErrorPayload(BaseModel):
    model_config = {"extra": "ignore"}

    cod: int = 0
    message: str = ""
