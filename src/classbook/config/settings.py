# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Application settings for classbook, loaded from ``CLASSBOOK_*`` variables.
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from classbook.config.environment import Environment


class ClassbookSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLASSBOOK_",
        extra="ignore",
        case_sensitive=False,
    )

    env: Environment = Field(
        default_factory=Environment.get_current,
        description="Deployment environment; falls back to ENVIRONMENT or ENV",
    )
    log_parse_failures: bool = Field(
        default=True, description="Log rejected raw input at DEBUG level"
    )

    @field_validator("env", mode="before")
    @classmethod
    def validate_env(cls, v: Any) -> Environment:
        if isinstance(v, Environment):
            return v
        return Environment.from_string(v)

    @property
    def logs_raw_input(self) -> bool:
        return self.log_parse_failures and self.env.logs_raw_input


def load_settings() -> ClassbookSettings:
    """Load a fresh settings instance from the environment."""
    return ClassbookSettings()


@functools.cache
def get_settings() -> ClassbookSettings:
    """Return the process-wide settings, loaded once.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return load_settings()
