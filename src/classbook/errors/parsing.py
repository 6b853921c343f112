# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Parse-failure error classes for classbook.

Every failure raised by the parsing layer is a ``ParseError`` carrying a
``ParseErrorKind`` and the human-readable message that is shown to the user
verbatim. ``MissingInputError`` is the exception: it signals a caller defect
rather than bad user input, so it is also a ``TypeError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

from classbook.errors.base import (
    ClassbookError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

# =============================================================================
# Error codes
# =============================================================================

PARSE_FORMAT_VIOLATION: Final = ErrorCode(
    "PARSE_FORMAT_VIOLATION", ErrorCategory.VALIDATION
)
PARSE_INVALID_INDEX: Final = ErrorCode("PARSE_INVALID_INDEX", ErrorCategory.PARSING)
PARSE_COMPOSITE_ARITY: Final = ErrorCode(
    "PARSE_COMPOSITE_ARITY", ErrorCategory.PARSING
)
PARSE_MISSING_INPUT: Final = ErrorCode("PARSE_MISSING_INPUT", ErrorCategory.INTERNAL)


class ParseErrorKind(str, Enum):
    """The closed set of ways raw input can fail to parse."""

    MISSING_INPUT = "missing_input"
    FORMAT_VIOLATION = "format_violation"
    INVALID_INDEX = "invalid_index"
    COMPOSITE_ARITY = "composite_arity"


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(ClassbookError):
    """Base class for all parse failures."""

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self.kind = kind
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )

    def __str__(self) -> str:
        # The message is surfaced to end users as is.
        return self.message


class FormatViolationError(ParseError):
    """Raised when a raw string does not satisfy a value type's format."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(
            message=message,
            kind=ParseErrorKind.FORMAT_VIOLATION,
            code=PARSE_FORMAT_VIOLATION,
            context=ctx,
        )

    @property
    def field(self) -> str | None:
        return self.context.get("field")


class InvalidIndexError(ParseError):
    """Raised when a one-based index is not a non-zero unsigned integer."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            kind=ParseErrorKind.INVALID_INDEX,
            code=PARSE_INVALID_INDEX,
            context=context,
        )


class CompositeArityError(ParseError):
    """Raised when composite input does not split into the expected token count."""

    def __init__(
        self,
        message: str,
        expected: int,
        actual: int,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["expected"] = expected
        ctx["actual"] = actual
        super().__init__(
            message=message,
            kind=ParseErrorKind.COMPOSITE_ARITY,
            code=PARSE_COMPOSITE_ARITY,
            context=ctx,
        )


class MissingInputError(ParseError, TypeError):
    """Raised when a required raw argument is None. This is a caller bug."""

    def __init__(self, argument: str = "value") -> None:
        super().__init__(
            message=f"{argument} must not be None",
            kind=ParseErrorKind.MISSING_INPUT,
            code=PARSE_MISSING_INPUT,
            severity=ErrorSeverity.CRITICAL,
            context={"argument": argument},
        )
