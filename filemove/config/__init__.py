"""
FileMove Configuration Module

YAML-based configuration with environment variable overrides and
pydantic validation.

Author: FileMove Project
License: MIT
"""

from .schema import AppConfig, CaseSensitivity, Config, LogLevel, RelocationConfig
from .config_loader import ConfigLoader, load_config

__all__ = [
    'AppConfig',
    'CaseSensitivity',
    'Config',
    'ConfigLoader',
    'LogLevel',
    'RelocationConfig',
    'load_config',
]
