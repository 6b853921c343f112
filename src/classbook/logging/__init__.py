# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook

"""
Public API for classbook logging.
"""

from __future__ import annotations

from classbook.logging.config import LoggingSettings
from classbook.logging.level import LogLevel
from classbook.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    current_log_context,
    get_logger,
    log_context,
)

__all__ = [
    "LogLevel",
    "StructuredFormatter",
    # Settings
    "LoggingSettings",
    # Setup and context
    "ROOT_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "log_context",
    "current_log_context",
]
