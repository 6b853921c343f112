# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Configuration for classbook logging.

Settings are read from ``CLASSBOOK_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from classbook.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """
    Configuration settings for classbook logging.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSBOOK_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value, description="Log level")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    include_level: bool = Field(default=True, description="Include log level in logs")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Validate that the level is a valid log level."""
        if isinstance(v, LogLevel):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        """
        Load logging settings from environment variables or defaults.
        """
        return cls()
