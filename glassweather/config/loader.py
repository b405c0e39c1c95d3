"""YAML config loader."""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from glassweather.config.defaults import APP_ID_ENV
from glassweather.config.schema import WidgetConfig
from glassweather.errors import SetupError


def load_config(path: str | Path) -> WidgetConfig:
    """Load and validate widget config from a YAML file.

    The app id may be left out of the file and supplied through the
    ``GLASSWEATHER_APP_ID`` environment variable instead.
    """
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise SetupError(f"could not read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SetupError(f"could not parse config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise SetupError(f"config {path} must be a mapping")

    if "appId" not in raw and "app_id" not in raw and os.environ.get(APP_ID_ENV):
        raw["appId"] = os.environ[APP_ID_ENV]

    return parse_config(raw)


def parse_config(raw: dict) -> WidgetConfig:
    """Validate a host-supplied config mapping."""
    try:
        return WidgetConfig(**raw)
    except ValidationError as e:
        raise SetupError(f"invalid config: {e}") from e


def config_json(config: WidgetConfig) -> str:
    """Render config as JSON using host key names; the app id stays masked."""
    return config.model_dump_json(indent=2, by_alias=True)
