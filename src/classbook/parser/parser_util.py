# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Functions that turn raw user input into validated domain values.

Every ``parse_*`` function trims its input, checks it against the target
type's format and either returns the value or raises a ``ParseError`` whose
message can be shown to the user as is. Passing ``None`` is a caller bug and
raises ``MissingInputError`` instead.

Use ``attempt`` to get a ``Result`` rather than an exception.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any, Final, TypeVar

from classbook.config.settings import get_settings
from classbook.domain.graded_test import (
    Finals,
    GradedTest,
    MidTerms,
    PracticalExam,
    ReadingAssessment,
)
from classbook.domain.index import Index
from classbook.domain.person import Address, Email, Name, Person, Phone
from classbook.domain.session import Session, SessionNumber
from classbook.domain.tag import Tag
from classbook.domain.task import Task, TaskDescription, TaskName, TaskPriority
from classbook.domain.value_object import StringValueObject
from classbook.errors.parsing import (
    CompositeArityError,
    InvalidIndexError,
    MissingInputError,
    ParseError,
)
from classbook.errors.result import Failure, Result, Success
from classbook.logging.logger import get_logger

T = TypeVar("T")
V = TypeVar("V", bound=StringValueObject)

logger = get_logger(__name__)

MESSAGE_INVALID_INDEX: Final = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_GRADED_TEST: Final = (
    "Invalid GradedTest format. Expected {expected} components."
)

_UNSIGNED_INTEGER = re.compile(r"[0-9]+")


def _require(raw: Any, argument: str) -> None:
    if raw is None:
        raise MissingInputError(argument)


def _require_many(raw: Any, argument: str) -> None:
    _require(raw, argument)
    if isinstance(raw, str):
        raise TypeError(f"{argument} must be a collection of strings, not a str")


def _reject(error: ParseError, raw: str) -> ParseError:
    settings = get_settings()
    if settings.log_parse_failures:
        extra = {
            "field": error.context.get("field", error.kind.value),
            "code": str(error.code),
        }
        if settings.logs_raw_input:
            extra["raw_value"] = raw
        logger.debug("Rejected raw input", extra=extra)
    return error


def _parse_value(value_type: type[V], raw: str | None) -> V:
    _require(raw, value_type.FIELD_NAME)
    trimmed = raw.strip()
    result = value_type.create(trimmed)
    if result.is_failure:
        raise _reject(result.error, trimmed)
    return result.unwrap()


def attempt(parser: Callable[..., T], *args: Any) -> Result[T, ParseError]:
    """Run a parser and capture a parse failure as a ``Failure``.

    ``MissingInputError`` still propagates: a None argument is a bug in the
    caller, not something to show a user.

    Example:
        result = attempt(parse_phone, raw_phone)
        if result.is_failure:
            print(result.error.message)
    """
    try:
        return Success(parser(*args))
    except MissingInputError:
        raise
    except ParseError as e:
        return Failure(e)


# --- Index ---
def parse_index(one_based_index: str) -> Index:
    """
    Parses ``one_based_index`` into an ``Index`` and returns it.
    Leading and trailing whitespaces will be trimmed.

    Raises:
        InvalidIndexError: If the index is not a non-zero unsigned integer
    """
    _require(one_based_index, "index")
    trimmed = one_based_index.strip()
    if not _UNSIGNED_INTEGER.fullmatch(trimmed) or int(trimmed) == 0:
        raise _reject(
            InvalidIndexError(MESSAGE_INVALID_INDEX, context={"raw_value": trimmed}),
            trimmed,
        )
    return Index.from_one_based(int(trimmed))


# --- Person fields ---
def parse_name(name: str) -> Name:
    """
    Parses a ``name`` into a ``Name``.
    Leading and trailing whitespaces will be trimmed.

    Raises:
        FormatViolationError: If the given name is invalid
    """
    return _parse_value(Name, name)


def parse_names(names: Iterable[str]) -> frozenset[Name]:
    """Parses every raw name; fails on the first invalid one."""
    _require_many(names, "names")
    return frozenset(parse_name(name) for name in names)


def parse_phone(phone: str) -> Phone:
    return _parse_value(Phone, phone)


def parse_address(address: str) -> Address:
    return _parse_value(Address, address)


def parse_email(email: str) -> Email:
    return _parse_value(Email, email)


def parse_tag(tag: str) -> Tag:
    return _parse_value(Tag, tag)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """Parses every raw tag; fails on the first invalid one."""
    _require_many(tags, "tags")
    return frozenset(parse_tag(tag) for tag in tags)


# --- Session ---
def parse_session_number(session_number: str) -> SessionNumber:
    return _parse_value(SessionNumber, session_number)


# --- Task fields ---
def parse_task_name(name: str) -> TaskName:
    return _parse_value(TaskName, name)


def parse_task_description(description: str) -> TaskDescription:
    return _parse_value(TaskDescription, description)


def parse_task_priority(priority: str) -> TaskPriority:
    return _parse_value(TaskPriority, priority)


# --- Graded test ---
def parse_reading_assessment(reading_assessment: str) -> ReadingAssessment:
    return _parse_value(ReadingAssessment, reading_assessment)


def parse_mid_terms(mid_terms: str) -> MidTerms:
    return _parse_value(MidTerms, mid_terms)


def parse_finals(finals: str) -> Finals:
    return _parse_value(Finals, finals)


def parse_practical_exam(practical_exam: str) -> PracticalExam:
    return _parse_value(PracticalExam, practical_exam)


def parse_graded_test(graded_test: str) -> GradedTest:
    """
    Parses five whitespace-separated scores into a ``GradedTest``.

    The scores are read in order: reading assessment 1, reading assessment 2,
    mid-terms, finals, practical exam. Runs of whitespace count as one
    separator.

    Raises:
        CompositeArityError: If the input does not hold exactly five scores
        FormatViolationError: If any score is invalid; the first bad one wins
    """
    _require(graded_test, "graded_test")
    components = graded_test.split()
    expected = GradedTest.COMPONENT_COUNT
    if len(components) != expected:
        raise _reject(
            CompositeArityError(
                MESSAGE_INVALID_GRADED_TEST.format(expected=expected),
                expected=expected,
                actual=len(components),
            ),
            graded_test.strip(),
        )

    reading_1, reading_2, mid_terms, finals, practical_exam = components
    return GradedTest(
        reading_assessment_1=parse_reading_assessment(reading_1),
        reading_assessment_2=parse_reading_assessment(reading_2),
        mid_terms=parse_mid_terms(mid_terms),
        finals=parse_finals(finals),
        practical_exam=parse_practical_exam(practical_exam),
    )


def parse_graded_tests(graded_tests: Iterable[str]) -> frozenset[GradedTest]:
    """Parses every raw graded test; fails on the first invalid one."""
    _require_many(graded_tests, "graded_tests")
    return frozenset(parse_graded_test(graded_test) for graded_test in graded_tests)


# --- Records ---
def parse_task(name: str, description: str, priority: str | None = None) -> Task:
    """Build a not-yet-done ``Task`` from raw fields, checked in argument order."""
    return Task(
        name=parse_task_name(name),
        description=parse_task_description(description),
        priority=parse_task_priority(priority) if priority is not None else None,
    )


def parse_person(
    name: str,
    phone: str,
    email: str,
    address: str,
    tags: Iterable[str] = (),
) -> Person:
    """Build a ``Person`` from raw fields, checked in argument order."""
    return Person(
        name=parse_name(name),
        phone=parse_phone(phone),
        email=parse_email(email),
        address=parse_address(address),
        tags=parse_tags(tags),
    )


def parse_session(session_number: str, attendees: Iterable[str] = ()) -> Session:
    """Build a ``Session`` from a raw session number and attendee names."""
    return Session(
        session_number=parse_session_number(session_number),
        attendees=parse_names(attendees),
    )
