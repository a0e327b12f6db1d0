"""
Configuration Loader

Loads configuration from a YAML file, merges environment variable
overrides and validates the result.

Author: FileMove Project
License: MIT
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from .schema import Config

DEFAULT_CONFIG_PATH = "config/config.yaml"

TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUE_VALUES


class ConfigLoader:
    """
    Configuration loader and manager.

    Loads configuration from YAML file, merges with environment variables
    and validates the structure.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to the configuration file. If None, uses
                FILEMOVE_CONFIG or the default location.
        """
        # Load environment variables from .env if present
        load_dotenv()

        self.config_path = config_path or os.getenv(
            "FILEMOVE_CONFIG",
            DEFAULT_CONFIG_PATH
        )
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """
        Load and validate configuration.

        Returns:
            Validated Config object

        Raises:
            ValueError: If YAML parsing or configuration validation fails
        """
        config_data = self._load_yaml()
        config_data = self._merge_env_vars(config_data)

        self._config = Config(**config_data)
        return self._config

    def _load_yaml(self) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Returns:
            Dictionary with configuration data (defaults if the file is missing)
        """
        config_file = Path(self.config_path)

        if not config_file.exists():
            return self._create_default_config()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML config: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")
        return data

    def _create_default_config(self) -> Dict[str, Any]:
        """
        Create default configuration structure.

        Returns:
            Default configuration dictionary
        """
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 8080,
                "log_level": "INFO",
                "log_to_file": False,
                "cors_origins": ["*"]
            },
            "relocation": {
                "case_sensitivity": "auto"
            }
        }

    def _merge_env_vars(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge environment variables into configuration.

        Environment variables override config file values.

        Args:
            config_data: Configuration dictionary from file

        Returns:
            Merged configuration dictionary
        """
        app = config_data.setdefault("app", {}) or {}
        config_data["app"] = app

        if os.getenv("APP_HOST"):
            app["host"] = os.getenv("APP_HOST")
        if os.getenv("APP_PORT"):
            try:
                app["port"] = int(os.getenv("APP_PORT"))
            except ValueError:
                raise ValueError(f"APP_PORT must be an integer: {os.getenv('APP_PORT')}")
        if os.getenv("APP_LOG_LEVEL"):
            app["log_level"] = os.getenv("APP_LOG_LEVEL")
        if os.getenv("APP_LOG_TO_FILE"):
            app["log_to_file"] = _env_flag("APP_LOG_TO_FILE")
        if os.getenv("APP_LOG_FILE"):
            app["log_file_path"] = os.getenv("APP_LOG_FILE")
        if os.getenv("APP_JSON_LOGS"):
            app["json_logs"] = _env_flag("APP_JSON_LOGS")
        if os.getenv("CORS_ORIGINS"):
            app["cors_origins"] = [
                origin.strip() for origin in os.getenv("CORS_ORIGINS").split(",")
                if origin.strip()
            ]

        if os.getenv("RELOCATION_CASE_SENSITIVITY"):
            relocation = config_data.setdefault("relocation", {}) or {}
            relocation["case_sensitivity"] = os.getenv("RELOCATION_CASE_SENSITIVITY")
            config_data["relocation"] = relocation

        return config_data

    def save(self, config: Config, path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Config object to save
            path: Path to save to (uses default if None)
        """
        save_path = Path(path or self.config_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = config.model_dump(mode="json")

        with open(save_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)

    def reload(self) -> Config:
        """Reload configuration from file."""
        return self.load()

    @property
    def config(self) -> Optional[Config]:
        """Get the current configuration object."""
        return self._config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Convenience function to load configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Loaded and validated Config object
    """
    loader = ConfigLoader(config_path)
    return loader.load()
