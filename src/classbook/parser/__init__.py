# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Parsing layer for classbook: raw strings in, validated values out.
"""

from __future__ import annotations

from classbook.errors.parsing import (
    CompositeArityError,
    FormatViolationError,
    InvalidIndexError,
    MissingInputError,
    ParseError,
    ParseErrorKind,
)
from classbook.parser.parser_util import (
    MESSAGE_INVALID_GRADED_TEST,
    MESSAGE_INVALID_INDEX,
    attempt,
    parse_address,
    parse_email,
    parse_finals,
    parse_graded_test,
    parse_graded_tests,
    parse_index,
    parse_mid_terms,
    parse_name,
    parse_names,
    parse_person,
    parse_phone,
    parse_practical_exam,
    parse_reading_assessment,
    parse_session,
    parse_session_number,
    parse_tag,
    parse_tags,
    parse_task,
    parse_task_description,
    parse_task_name,
    parse_task_priority,
)

__all__ = [
    # Errors
    "ParseError",
    "ParseErrorKind",
    "FormatViolationError",
    "InvalidIndexError",
    "CompositeArityError",
    "MissingInputError",
    # Messages
    "MESSAGE_INVALID_INDEX",
    "MESSAGE_INVALID_GRADED_TEST",
    # Parsers
    "attempt",
    "parse_index",
    "parse_name",
    "parse_names",
    "parse_phone",
    "parse_address",
    "parse_email",
    "parse_tag",
    "parse_tags",
    "parse_session_number",
    "parse_task_name",
    "parse_task_description",
    "parse_task_priority",
    "parse_reading_assessment",
    "parse_mid_terms",
    "parse_finals",
    "parse_practical_exam",
    "parse_graded_test",
    "parse_graded_tests",
    "parse_task",
    "parse_person",
    "parse_session",
]
