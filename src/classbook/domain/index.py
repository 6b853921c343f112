# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Positional index into a displayed record list.
"""

from __future__ import annotations

from pydantic import Field

from classbook.domain.value_object import ValueObject


class Index(ValueObject):
    """
    Represents a zero-based index.

    Users see one-based positions while list storage is zero-based; build an
    Index with whichever base you hold and read back the other.
    """

    zero_based: int = Field(ge=0)

    @classmethod
    def from_zero_based(cls, zero_based_index: int) -> Index:
        return cls(zero_based=zero_based_index)

    @classmethod
    def from_one_based(cls, one_based_index: int) -> Index:
        return cls(zero_based=one_based_index - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
