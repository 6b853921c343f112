# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Tutoring session record and its SessionNumber value object.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from classbook.domain.person import Name
from classbook.domain.record import Record
from classbook.domain.value_object import StringValueObject


class SessionNumber(StringValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Session number should be a positive integer"
    # No sign, no leading zeros.
    VALIDATION_REGEX: ClassVar[str] = r"[1-9][0-9]*"
    FIELD_NAME: ClassVar[str] = "session_number"

    @property
    def number(self) -> int:
        return int(self.value)


class Session(Record):
    """A numbered tutoring session and the names of the students who attended."""

    IDENTITY_FIELDS: ClassVar[tuple[str, ...]] = ("session_number",)

    session_number: SessionNumber
    attendees: frozenset[Name] = Field(default_factory=frozenset)

    def is_same_session(self, other: Session | None) -> bool:
        return self.is_same(other)

    def with_attendee(self, name: Name) -> Session:
        return self.with_changes(attendees=self.attendees | {name})
