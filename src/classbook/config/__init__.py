# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Configuration for classbook.
"""

from __future__ import annotations

from classbook.config.environment import Environment
from classbook.config.errors import CONFIG_ENVIRONMENT_ERROR, CONFIG_ERROR, ConfigError
from classbook.config.settings import ClassbookSettings, get_settings, load_settings

__all__ = [
    "Environment",
    "ClassbookSettings",
    "load_settings",
    "get_settings",
    "ConfigError",
    "CONFIG_ERROR",
    "CONFIG_ENVIRONMENT_ERROR",
]
