"""
Unit Tests for Configuration Module

Tests configuration loading, validation, environment variable merging,
and error handling.

Author: FileMove Project
License: MIT
"""

import pytest
import yaml

from filemove.config.config_loader import ConfigLoader, load_config
from filemove.config.schema import AppConfig, CaseSensitivity, Config, RelocationConfig

ENV_VARS = [
    "FILEMOVE_CONFIG",
    "APP_HOST",
    "APP_PORT",
    "APP_LOG_LEVEL",
    "APP_LOG_TO_FILE",
    "APP_LOG_FILE",
    "APP_JSON_LOGS",
    "CORS_ORIGINS",
    "RELOCATION_CASE_SENSITIVITY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment variables out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_create_default_config(self):
        """Test default configuration creation."""
        loader = ConfigLoader()
        default_config = loader._create_default_config()

        assert "app" in default_config
        assert "relocation" in default_config
        assert default_config["app"]["port"] == 8080
        assert default_config["relocation"]["case_sensitivity"] == "auto"

    def test_load_nonexistent_config_uses_defaults(self, tmp_path):
        """Loading a missing config file yields defaults."""
        loader = ConfigLoader(str(tmp_path / "config.yaml"))

        config = loader.load()

        assert isinstance(config, Config)
        assert config.app.port == 8080
        assert config.app.log_to_file is False
        assert config.relocation.case_sensitivity == "auto"
        assert loader.config is config

    def test_load_yaml_file(self, tmp_path):
        """Values from the YAML file are applied."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({
            "app": {"port": 9000, "log_level": "debug"},
            "relocation": {"case_sensitivity": "insensitive"},
        }))

        config = load_config(str(config_path))

        assert config.app.port == 9000
        assert config.app.log_level == "DEBUG"
        assert config.relocation.case_sensitivity == "insensitive"

    def test_empty_yaml_file(self, tmp_path):
        """An empty file behaves like an empty mapping."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")

        config = load_config(str(config_path))

        assert config.app.host == "0.0.0.0"

    def test_invalid_yaml_raises_error(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("app: [unclosed")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_config(str(config_path))

    def test_non_mapping_yaml_raises_error(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(str(config_path))

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        """FILEMOVE_CONFIG selects the config file."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(yaml.safe_dump({"app": {"port": 7000}}))
        monkeypatch.setenv("FILEMOVE_CONFIG", str(config_path))

        loader = ConfigLoader()

        assert loader.config_path == str(config_path)
        assert loader.load().app.port == 7000

    def test_env_var_override(self, tmp_path, monkeypatch):
        """Test environment variable overrides."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({"app": {"port": 9000}}))
        monkeypatch.setenv("APP_PORT", "9090")
        monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("APP_LOG_TO_FILE", "true")
        monkeypatch.setenv("APP_LOG_FILE", "/tmp/filemove-test.log")
        monkeypatch.setenv("APP_JSON_LOGS", "1")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")
        monkeypatch.setenv("RELOCATION_CASE_SENSITIVITY", "Sensitive")

        config = ConfigLoader(str(config_path)).load()

        assert config.app.port == 9090
        assert config.app.log_level == "WARNING"
        assert config.app.log_to_file is True
        assert config.app.log_file_path == "/tmp/filemove-test.log"
        assert config.app.json_logs is True
        assert config.app.cors_origins == ["http://a.example", "http://b.example"]
        assert config.relocation.case_sensitivity == "sensitive"

    def test_invalid_port_env_raises_error(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APP_PORT", "eighty")

        with pytest.raises(ValueError, match="APP_PORT"):
            ConfigLoader(str(tmp_path / "config.yaml")).load()

    def test_save_and_reload(self, tmp_path):
        """Saved configuration loads back unchanged."""
        config_path = tmp_path / "saved" / "config.yaml"
        loader = ConfigLoader(str(config_path))
        config = Config(
            app={"port": 8181, "log_level": "ERROR"},
            relocation={"case_sensitivity": "insensitive"}
        )

        loader.save(config)
        reloaded = loader.reload()

        assert config_path.exists()
        assert reloaded == config


class TestConfigSchema:
    """Test suite for configuration schema models."""

    def test_app_config_defaults(self):
        config = AppConfig()

        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.log_level == "INFO"
        assert config.cors_origins == ["*"]

    def test_relocation_config_default(self):
        assert RelocationConfig().case_sensitivity == CaseSensitivity.AUTO

    def test_invalid_case_sensitivity_rejected(self):
        with pytest.raises(ValueError):
            RelocationConfig(case_sensitivity="sometimes")

    def test_invalid_port_rejected(self):
        with pytest.raises(ValueError):
            AppConfig(port=70000)

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            AppConfig(log_level="LOUD")

    def test_validate_assignment(self):
        """Assignments on the root model are validated."""
        config = Config()

        with pytest.raises(ValueError):
            config.relocation = {"case_sensitivity": "sometimes"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
