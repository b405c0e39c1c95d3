"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from glassweather.config.schema import WidgetConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def widget_config() -> WidgetConfig:
    """Config pointing at a fake API host, labelled in UTC."""
    return WidgetConfig(
        locationId="3369157",
        appId="test-app-id",
        units="metric",
        baseUrl="https://test-owm.example.com/data/2.5/",
        timezone="UTC",
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "locationId": "3369157",
        "appId": "test-app-id",
        "units": "metric",
        "interval": "15m",
    }
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def current_json() -> dict:
    with open(FIXTURE_DIR / "owm_current.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_json() -> dict:
    with open(FIXTURE_DIR / "owm_forecast_daily.json") as f:
        return json.load(f)
