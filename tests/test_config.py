"""Tests for configuration loading."""

from pathlib import Path

import pytest
import tomli_w

from config import CONFIG_ENV_VAR, Config, get_config_path, load_config


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "config" / "sales-tracker.toml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


class TestLoadConfig:
    def test_env_var_overrides_path(self, config_path):
        assert get_config_path() == config_path

    def test_default_path_without_env_var(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        assert get_config_path() == Path.home() / ".config" / "sales-tracker.toml"

    def test_missing_file_writes_defaults(self, config_path):
        config = load_config()

        assert config_path.exists()
        assert config == Config.default()

    def test_defaults_round_trip(self, config_path):
        written = load_config()

        assert load_config() == written

    def test_values_from_file(self, config_path, tmp_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_bytes(
            tomli_w.dumps(
                {
                    "base_dir": str(tmp_path / "data"),
                    "database": {"filename": "sales.db", "query_timeout": 2.5},
                    "logging": {"level": "DEBUG"},
                }
            ).encode()
        )

        config = load_config()

        assert config.db_path == tmp_path / "data" / "db" / "sales.db"
        assert config.query_timeout == 2.5
        assert config.busy_timeout == Config.default().busy_timeout
        assert config.log_level == "DEBUG"
        assert config.log_dir == tmp_path / "data" / "logs"

    def test_negative_timeout_rejected(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_bytes(
            tomli_w.dumps({"database": {"query_timeout": -1}}).encode()
        )

        with pytest.raises(ValueError, match="must not be negative"):
            load_config()

    def test_log_level_is_normalised(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_bytes(tomli_w.dumps({"logging": {"level": "debug"}}).encode())

        assert load_config().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_bytes(tomli_w.dumps({"logging": {"level": "LOUD"}}).encode())

        with pytest.raises(ValueError, match="Unknown log level"):
            load_config()
