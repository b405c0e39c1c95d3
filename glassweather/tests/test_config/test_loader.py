"""Tests for config loading."""

from datetime import timedelta
from pathlib import Path

import pytest
import yaml

from glassweather.config.defaults import APP_ID_ENV
from glassweather.config.loader import config_json, load_config, parse_config
from glassweather.config.schema import Units
from glassweather.errors import SetupError


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.location_id == "3369157"
        assert config.units == Units.METRIC
        assert config.interval == timedelta(minutes=15)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SetupError, match="could not read config"):
            load_config(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("locationId: [unclosed")
        with pytest.raises(SetupError, match="could not parse config"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(SetupError, match="must be a mapping"):
            load_config(path)

    def test_empty_yaml_is_invalid(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(SetupError, match="invalid config"):
            load_config(path)

    def test_app_id_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(APP_ID_ENV, "from-env")
        path = tmp_path / "config.yaml"
        with open(path, "w") as f:
            yaml.dump({"locationId": "1", "units": "imperial"}, f)
        config = load_config(path)
        assert config.app_id.get_secret_value() == "from-env"

    def test_file_app_id_wins_over_env(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv(APP_ID_ENV, "from-env")
        config = load_config(config_yaml_path)
        assert config.app_id.get_secret_value() == "test-app-id"


class TestParseConfig:
    def test_invalid_units(self):
        with pytest.raises(SetupError):
            parse_config({"locationId": "1", "appId": "k", "units": "si"})


class TestConfigJson:
    def test_uses_host_keys_and_masks_secret(self, config_yaml_path: Path):
        text = config_json(load_config(config_yaml_path))
        assert '"locationId": "3369157"' in text
        assert "test-app-id" not in text
        assert "**********" in text
