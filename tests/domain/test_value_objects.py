# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""
Value objects tests using pytest.
"""

import time

import pytest
from pydantic import ValidationError

from classbook.domain import (
    Address,
    Email,
    Finals,
    MidTerms,
    Name,
    PracticalExam,
    ReadingAssessment,
    Score,
    SessionNumber,
    StringValueObject,
    Tag,
    TaskDescription,
    TaskName,
    TaskPriority,
)
from classbook.errors import FormatViolationError, MissingInputError, ParseErrorKind


@pytest.mark.parametrize(
    ("value_type", "valid", "invalid"),
    [
        (
            Name,
            ["peter jack", "12345", "Capital Tan", "David Roger Jackson Ray Jr 2nd"],
            ["", " ", "^", "peter*", " alice"],
        ),
        (Tag, ["friends", "CS2103", "a"], ["", "best friends", "hello!", "under_score"]),
        (TaskName, ["Read chapter 3", "x"], ["", " x", "task!"]),
        (TaskDescription, ["homework", "Q4", "7"], ["", "two words", "dash-ed", "punct."]),
        (TaskPriority, ["low", "medium", "high"], ["", "urgent", "HIGH", " low"]),
        (SessionNumber, ["1", "12", "100"], ["", "0", "01", "-1", "+1", "one"]),
        (Address, ["Blk 456, Den Road, #01-355", "-", "a"], ["", " ", " leading"]),
    ],
)
def test_predicate(value_type, valid, invalid) -> None:
    for raw in valid:
        assert value_type.is_valid(raw), raw
    for raw in invalid:
        assert not value_type.is_valid(raw), raw


@pytest.mark.parametrize(
    "raw",
    [
        "PeterJack_1190@example.com",
        "test@localhost",
        "a1+be.d@example1.com",
        "peter_jack@very-very-very-long-example.com",
        "if.you.dream.it_you.can.do.it@example.com",
        "e1234567@u.nus.edu",
        "mail@a-bc",
        "mail@x.y-zz",
    ],
)
def test_email_valid(raw: str) -> None:
    assert Email.is_valid(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "@example.com",
        "peterjackexample.com",
        "peterjack@",
        "peterjack@-",
        "peter jack@example.com",
        "-peterjack@example.com",
        "peterjack-@example.com",
        "peter..jack@example.com",
        "peterjack@example.c",
        "peterjack@-example.com",
        "peterjack@example.com-",
        "peterjack@example_com",
        "peterjack@exam_ple.com",
        "pétér@example.com",
        "mail@a-b",
        "mail@example.a-b-c",
    ],
)
def test_email_invalid(raw: str) -> None:
    assert not Email.is_valid(raw)


def test_email_rejects_long_invalid_domain_quickly() -> None:
    raw = "a@" + "a" * 40 + "!"
    start = time.perf_counter()
    assert not Email.is_valid(raw)
    assert time.perf_counter() - start < 1.0


def test_is_valid_rejects_none() -> None:
    with pytest.raises(MissingInputError):
        Name.is_valid(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("base", [StringValueObject, Score])
def test_base_types_cannot_validate(base) -> None:
    with pytest.raises(TypeError, match="declares no format"):
        base.is_valid("5")
    with pytest.raises(TypeError):
        base(value="")
    with pytest.raises(TypeError):
        base.create("5")


def test_construction_validates_first() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Tag(value="not a tag")
    assert Tag.MESSAGE_CONSTRAINTS in str(exc_info.value)


def test_immutability() -> None:
    name = Name(value="Alice")
    with pytest.raises(ValidationError):
        name.value = "Bob"


def test_extra_fields_forbidden() -> None:
    with pytest.raises(ValidationError):
        Name(value="Alice", nickname="Al")


def test_value_equality_and_hash() -> None:
    assert Name(value="Alice") == Name(value="Alice")
    assert hash(Name(value="Alice")) == hash(Name(value="Alice"))
    assert Name(value="Alice") != Name(value="alice")
    assert len({Tag(value="a"), Tag(value="a"), Tag(value="b")}) == 2


def test_equality_is_per_type() -> None:
    # Same raw value, different field types.
    assert TaskDescription(value="abc") != Tag(value="abc")
    assert ReadingAssessment(value="80") != MidTerms(value="80")
    assert Name(value="abc") != "abc"


def test_create_success_and_failure() -> None:
    ok = Name.create("Alice")
    assert ok.is_success
    assert ok.unwrap() == Name(value="Alice")

    bad = Name.create("Al!ce")
    assert bad.is_failure
    assert isinstance(bad.error, FormatViolationError)
    assert bad.error.kind is ParseErrorKind.FORMAT_VIOLATION
    assert bad.error.message == Name.MESSAGE_CONSTRAINTS
    assert bad.error.field == "name"


def test_canonical_round_trip() -> None:
    for value in (Name(value="Alice Tan"), Tag(value="cs"), Email(value="a@bc.com")):
        assert type(value).create(value.value).unwrap() == value


def test_str_forms() -> None:
    assert str(Name(value="Alice")) == "Alice"
    assert str(Tag(value="friends")) == "[friends]"
    assert repr(Name(value="Alice")) == "Name(value='Alice')"


class TestScores:
    @pytest.mark.parametrize("raw", ["0", "7", "42", "99", "100", "-"])
    def test_valid_scores(self, raw: str) -> None:
        for score_type in (ReadingAssessment, MidTerms, Finals, PracticalExam):
            assert score_type.is_valid(raw)

    @pytest.mark.parametrize("raw", ["", "101", "007", "-1", "50.5", "A", "--", "1 0"])
    def test_invalid_scores(self, raw: str) -> None:
        for score_type in (ReadingAssessment, MidTerms, Finals, PracticalExam):
            assert not score_type.is_valid(raw)

    def test_score_accessors(self) -> None:
        graded = Finals(value="88")
        assert graded.is_graded
        assert graded.score == 88

        pending = Finals(value="-")
        assert not pending.is_graded
        assert pending.score is None

    def test_messages_name_the_component(self) -> None:
        assert ReadingAssessment.MESSAGE_CONSTRAINTS.startswith("Reading assessment")
        assert MidTerms.MESSAGE_CONSTRAINTS.startswith("Mid-terms")
        assert Finals.MESSAGE_CONSTRAINTS.startswith("Finals")
        assert PracticalExam.MESSAGE_CONSTRAINTS.startswith("Practical exam")


def test_task_priority_rank() -> None:
    ranks = [TaskPriority(value=v).rank for v in ("low", "medium", "high")]
    assert ranks == [0, 1, 2]


def test_session_number_number() -> None:
    assert SessionNumber(value="12").number == 12
