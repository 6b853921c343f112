"""Tests for the parse-failure taxonomy."""

from __future__ import annotations

from classbook.errors import ClassbookError, ErrorCategory, ErrorSeverity
from classbook.errors.parsing import (
    PARSE_COMPOSITE_ARITY,
    PARSE_FORMAT_VIOLATION,
    PARSE_INVALID_INDEX,
    PARSE_MISSING_INPUT,
    CompositeArityError,
    FormatViolationError,
    InvalidIndexError,
    MissingInputError,
    ParseError,
    ParseErrorKind,
)


class TestParseErrors:
    def test_format_violation(self) -> None:
        error = FormatViolationError("Tags names should be alphanumeric", field="tag")

        assert isinstance(error, ParseError)
        assert isinstance(error, ClassbookError)
        assert error.kind is ParseErrorKind.FORMAT_VIOLATION
        assert error.code == PARSE_FORMAT_VIOLATION
        assert error.category == ErrorCategory.VALIDATION
        assert error.severity == ErrorSeverity.WARNING
        assert error.field == "tag"
        # Shown to users verbatim, so no code prefix.
        assert str(error) == "Tags names should be alphanumeric"

    def test_invalid_index(self) -> None:
        error = InvalidIndexError("Index is not a non-zero unsigned integer.")
        assert error.kind is ParseErrorKind.INVALID_INDEX
        assert error.code == PARSE_INVALID_INDEX
        assert not isinstance(error, FormatViolationError)

    def test_composite_arity_context(self) -> None:
        error = CompositeArityError("Expected 5 components.", expected=5, actual=4)
        assert error.kind is ParseErrorKind.COMPOSITE_ARITY
        assert error.code == PARSE_COMPOSITE_ARITY
        assert error.context == {"expected": 5, "actual": 4}

    def test_missing_input_is_a_type_error(self) -> None:
        error = MissingInputError("name")
        assert isinstance(error, TypeError)
        assert isinstance(error, ParseError)
        assert error.kind is ParseErrorKind.MISSING_INPUT
        assert error.code == PARSE_MISSING_INPUT
        assert error.severity == ErrorSeverity.CRITICAL
        assert error.message == "name must not be None"
        assert error.context == {"argument": "name"}

    def test_to_dict_includes_context(self) -> None:
        data = FormatViolationError("bad", field="phone").to_dict()
        assert data["code"] == "PARSE_FORMAT_VIOLATION"
        assert data["context"] == {"field": "phone"}
