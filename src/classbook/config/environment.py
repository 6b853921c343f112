# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Deployment environments for classbook.

The environment decides how much of a user's raw input may reach the logs:
outside production a rejected value is logged verbatim, in production only
its field and error code are.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Final

from classbook.config.errors import CONFIG_ENVIRONMENT_ERROR, ConfigError

# Checked in order; the first one that is set wins.
ENVIRONMENT_VARIABLES: Final = ("CLASSBOOK_ENV", "ENVIRONMENT", "ENV")


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @property
    def logs_raw_input(self) -> bool:
        """Whether rejected raw input may be written to the logs."""
        return self is not Environment.PRODUCTION

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """Resolve a name or its short alias (dev, test, prod).

        Raises:
            ConfigError: If ``value`` names no known environment
        """
        if value is None:
            return cls.DEVELOPMENT
        key = value.strip().lower()
        for env in cls:
            if key == env.value or key == _ALIASES[env]:
                return env
        raise ConfigError(
            message=f"Invalid environment: {value}",
            code=CONFIG_ENVIRONMENT_ERROR,
            context={"provided_value": value},
        )

    @classmethod
    def get_current(cls) -> Environment:
        raw = next(
            (os.environ[name] for name in ENVIRONMENT_VARIABLES if os.environ.get(name)),
            None,
        )
        return cls.from_string(raw)


_ALIASES: Final = {
    Environment.DEVELOPMENT: "dev",
    Environment.TESTING: "test",
    Environment.PRODUCTION: "prod",
}
