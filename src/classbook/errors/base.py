# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Base error classes and utilities for the classbook error handling system.

This module provides the foundation for structured error handling with
error codes, contextual information, and error categories.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final


class ErrorSeverity(str, Enum):
    """Severity levels for errors across classbook."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory(str, Enum):
    """Top-level categories an error code belongs to."""

    INTERNAL = "internal"
    VALIDATION = "validation"
    PARSING = "parsing"
    CONFIG = "config"


class ErrorCode:
    """An error code string bound to its category."""

    def __init__(
        self, code: str, category: ErrorCategory = ErrorCategory.INTERNAL
    ) -> None:
        """Initialize a new error code.

        Args:
            code: Unique identifier for this error code
            category: The category this error code belongs to
        """
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return self.code == other.code
        if isinstance(other, str):
            return self.code == other
        return False

    def __hash__(self) -> int:
        return hash(self.code)


INTERNAL_ERROR: Final = ErrorCode("INTERNAL_ERROR", ErrorCategory.INTERNAL)


class ClassbookError(Exception):
    """
    Base error class for classbook errors.
    Should only be subclassed for package-specific errors, not instantiated directly.
    """

    message: str
    code: ErrorCode
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> ClassbookError:
        if cls is ClassbookError:
            raise TypeError(
                "Do not instantiate ClassbookError directly; "
                "subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode = INTERNAL_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new ClassbookError (never instantiate directly).

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Merged into the context
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)
        super().__init__(message)

    def add_context(self, key: str, value: Any) -> ClassbookError:
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def with_context(self, context: dict[str, Any]) -> ClassbookError:
        """Return a copy of this error with additional context."""
        new_error = self.__class__.__new__(self.__class__)
        new_error.__dict__.update(self.__dict__)
        new_error.args = self.args
        new_error.context = {**self.context, **context}
        if self.__cause__ is not None:
            new_error.__cause__ = self.__cause__
        return new_error

    def __str__(self) -> str:
        """Get string representation of the error.

        Returns:
            String in format 'code: message'
        """
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": str(self.code),
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
