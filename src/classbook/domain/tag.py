# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Tag value object.
"""

from typing import ClassVar

from classbook.domain.value_object import StringValueObject


class Tag(StringValueObject):
    """
    A label attached to a person.

    Usage:
        Tag(value="friends")  # Valid
        Tag(value="best friends")  # Raises ValidationError
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9]+"
    FIELD_NAME: ClassVar[str] = "tag"

    def __str__(self) -> str:
        return f"[{self.value}]"
