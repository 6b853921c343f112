# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Value Objects for classbook.

Value Objects are immutable domain objects that are defined by their attributes
rather than their identity. Every field a user can type in (a name, a phone
number, an exam score) is wrapped in one, so that an instance can only exist
once its raw string has passed the field's format check.

Example:
    class Phone(StringValueObject):
        MESSAGE_CONSTRAINTS: ClassVar[str] = "Phone numbers should only contain numbers"
        VALIDATION_REGEX: ClassVar[str] = r"\\d{3,}"

    # Usage
    phone = Phone(value="98765432")
    result = Phone.create("abc")  # Failure(FormatViolationError(...))
"""

from __future__ import annotations

import re
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, field_validator

from classbook.errors.result import Failure, Result, Success
from classbook.errors.parsing import FormatViolationError, MissingInputError


class ValueObject(BaseModel):
    """Base class for value objects.

    Value objects are immutable domain objects that are defined by their attributes
    rather than their identity. They are equal if all their attributes are equal.

    Features:
    - Immutable after creation
    - Value-based equality
    - Hashable for use in sets and dictionaries
    - Built-in validation
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    def __eq__(self, other: object) -> bool:
        """Value objects are equal if their type and attributes are equal."""
        if type(other) is not type(self):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((type(self),) + tuple(self.model_dump().values()))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.model_dump().items())
        return f"{self.__class__.__name__}({attrs})"


class StringValueObject(ValueObject):
    """A value object wrapping one validated string.

    Subclasses declare ``VALIDATION_REGEX`` (matched against the whole string)
    and ``MESSAGE_CONSTRAINTS``, the message shown to users when a raw string
    is rejected. ``FIELD_NAME`` labels the field in error context and logs.
    A class missing either one cannot validate and refuses to be used.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[str] = ""
    FIELD_NAME: ClassVar[str] = "value"
    REGEX_FLAGS: ClassVar[int] = 0

    value: str

    @classmethod
    def is_valid(cls, test: str) -> bool:
        """Return True if ``test`` matches this type's validation regex."""
        if not (cls.VALIDATION_REGEX and cls.MESSAGE_CONSTRAINTS):
            raise TypeError(
                f"{cls.__name__} declares no format; use one of its subclasses."
            )
        if test is None:
            raise MissingInputError(cls.FIELD_NAME)
        return re.fullmatch(cls.VALIDATION_REGEX, test, cls.REGEX_FLAGS) is not None

    @field_validator("value")
    @classmethod
    def _validate_value(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    @classmethod
    def create(cls, raw: str) -> Result[Self, FormatViolationError]:
        """Validate ``raw`` and wrap it, without raising on bad input.

        Args:
            raw: The candidate canonical value, already trimmed

        Returns:
            Success with the new instance, or Failure carrying a
            FormatViolationError with this type's MESSAGE_CONSTRAINTS

        Raises:
            MissingInputError: If ``raw`` is None
        """
        if not cls.is_valid(raw):
            return Failure(
                FormatViolationError(cls.MESSAGE_CONSTRAINTS, field=cls.FIELD_NAME)
            )
        return Success(cls(value=raw))

    def __str__(self) -> str:
        return self.value
