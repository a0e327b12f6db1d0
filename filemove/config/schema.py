"""
Configuration Schema and Models

Pydantic models for the FileMove configuration, providing validation,
default values and type checking.

Author: FileMove Project
License: MIT
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Logging level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CaseSensitivity(str, Enum):
    """How directory paths are compared when checking source == destination."""
    AUTO = "auto"
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


class AppConfig(BaseModel):
    """Web service and logging configuration."""

    model_config = ConfigDict(use_enum_values=True)

    host: str = Field(
        default="0.0.0.0",
        description="API host address"
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="API port"
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application logging level"
    )
    log_to_file: bool = Field(
        default=False,
        description="Enable logging to file"
    )
    log_file_path: str = Field(
        default="logs/filemove.log",
        description="Log file location"
    )
    log_rotation_size: int = Field(
        default=10485760,  # 10MB
        description="Log file size before rotation (bytes)"
    )
    log_retention_count: int = Field(
        default=5,
        description="Number of rotated log files to keep"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit logs as JSON"
    )
    cors_origins: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class RelocationConfig(BaseModel):
    """File relocation behaviour."""

    model_config = ConfigDict(use_enum_values=True)

    case_sensitivity: CaseSensitivity = Field(
        default=CaseSensitivity.AUTO,
        description=(
            "Path comparison policy for the same-directory check "
            "(auto = case-insensitive on Windows and macOS)"
        )
    )

    @field_validator("case_sensitivity", mode="before")
    @classmethod
    def normalize_case_sensitivity(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class Config(BaseModel):
    """
    Root configuration model for FileMove.

    Loaded from config.yaml and overridden by environment variables.
    """

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)

    app: AppConfig = Field(default_factory=AppConfig)
    relocation: RelocationConfig = Field(default_factory=RelocationConfig)
