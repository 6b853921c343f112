# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Configuration-specific error classes for classbook.
"""

from __future__ import annotations

from typing import Any, Final

from classbook.errors.base import (
    ClassbookError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

CONFIG_ERROR: Final = ErrorCode("CONFIG_ERROR", ErrorCategory.CONFIG)
CONFIG_ENVIRONMENT_ERROR: Final = ErrorCode(
    "CONFIG_ENVIRONMENT_ERROR", ErrorCategory.CONFIG
)


class ConfigError(ClassbookError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = CONFIG_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
