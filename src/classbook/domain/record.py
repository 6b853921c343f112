# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Composite record base class for classbook.

A record aggregates several value objects (plus the odd primitive flag) and
distinguishes two notions of sameness:

- identity (``is_same``): the fields in ``IDENTITY_FIELDS`` match, so two
  records describe the same logical thing even if other data differs;
- full equality (``==``): every field matches.

Records are immutable. Editing one means building a new instance with
``with_changes`` and handing it to whatever owns the record list.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base class for composite records.

    Subclasses must declare ``IDENTITY_FIELDS``; each name must be a model field.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    IDENTITY_FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        unknown = set(cls.IDENTITY_FIELDS) - set(cls.model_fields)
        if not cls.IDENTITY_FIELDS or unknown:
            raise TypeError(
                f"{cls.__name__} must declare IDENTITY_FIELDS naming its own fields"
            )

    def identity(self) -> tuple[Any, ...]:
        """Return the identity field values, in declaration order."""
        return tuple(getattr(self, name) for name in self.IDENTITY_FIELDS)

    def field_values(self) -> tuple[Any, ...]:
        """Return every field value, in declaration order."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def is_same(self, other: Record | None) -> bool:
        """Return True if ``other`` is logically the same record.

        This is a weaker notion than ``==``: only identity fields are compared.
        """
        if other is self:
            return True
        return (
            other is not None
            and type(other) is type(self)
            and other.identity() == self.identity()
        )

    def with_changes(self, **changes: Any) -> Self:
        """Return a new, validated record with the given fields replaced."""
        current = {name: getattr(self, name) for name in type(self).model_fields}
        return self.__class__(**{**current, **changes})

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return self.field_values() == other.field_values()

    def __hash__(self) -> int:
        return hash((type(self),) + self.field_values())

    def __str__(self) -> str:
        attrs = ", ".join(
            f"{name}={getattr(self, name)}" for name in type(self).model_fields
        )
        return f"{self.__class__.__name__}{{{attrs}}}"
