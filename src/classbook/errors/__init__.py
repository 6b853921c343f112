# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Public API for the classbook error handling system.
"""

from __future__ import annotations

from classbook.errors.base import (
    INTERNAL_ERROR,
    ClassbookError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)
from classbook.errors.parsing import (
    CompositeArityError,
    FormatViolationError,
    InvalidIndexError,
    MissingInputError,
    ParseError,
    ParseErrorKind,
)
from classbook.errors.result import (
    Failure,
    Result,
    Success,
    combine,
    failure,
    from_exception,
    of,
)

__all__ = [
    # Errors
    "ClassbookError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "INTERNAL_ERROR",
    # Parse errors
    "ParseError",
    "ParseErrorKind",
    "FormatViolationError",
    "InvalidIndexError",
    "CompositeArityError",
    "MissingInputError",
    # Result
    "Result",
    "Success",
    "Failure",
    "of",
    "failure",
    "from_exception",
    "combine",
]
