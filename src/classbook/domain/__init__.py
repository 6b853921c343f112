# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""Domain layer for classbook.

This package contains the validated value objects and the composite records
built from them.
"""

from classbook.domain.graded_test import (
    Finals,
    GradedTest,
    MidTerms,
    PracticalExam,
    ReadingAssessment,
    Score,
)
from classbook.domain.index import Index
from classbook.domain.person import Address, Email, Name, Person, Phone
from classbook.domain.record import Record
from classbook.domain.session import Session, SessionNumber
from classbook.domain.tag import Tag
from classbook.domain.task import Task, TaskDescription, TaskName, TaskPriority
from classbook.domain.value_object import StringValueObject, ValueObject

__all__ = [
    # Bases
    "ValueObject",
    "StringValueObject",
    "Record",
    # Value objects
    "Index",
    "Name",
    "Phone",
    "Email",
    "Address",
    "Tag",
    "TaskName",
    "TaskDescription",
    "TaskPriority",
    "SessionNumber",
    "Score",
    "ReadingAssessment",
    "MidTerms",
    "Finals",
    "PracticalExam",
    # Records
    "Person",
    "Task",
    "Session",
    "GradedTest",
]
