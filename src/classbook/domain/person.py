# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Person record and its value objects: Name, Phone, Email, Address.
"""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import Field

from classbook.domain.record import Record
from classbook.domain.tag import Tag
from classbook.domain.value_object import StringValueObject

# ASCII letters and digits, no underscore
_ALNUM = r"[^\W_]"


# --- Name ---
class Name(StringValueObject):
    """A person's name. Used for both contacts and session attendees."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    # The first character must not be a whitespace, otherwise " " (a blank
    # string) becomes a valid input.
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9][A-Za-z0-9 ]*"
    FIELD_NAME: ClassVar[str] = "name"


# --- Phone ---
class Phone(StringValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[0-9]{3,}"
    FIELD_NAME: ClassVar[str] = "phone"


# --- Email ---
_SPECIAL_CHARACTERS = "+_.-"
_LOCAL_PART_REGEX = (
    rf"{_ALNUM}+([{re.escape(_SPECIAL_CHARACTERS)}]{_ALNUM}+)*"
)
_DOMAIN_PART_REGEX = rf"{_ALNUM}+(-{_ALNUM}+)*"
# The last domain label holds two adjacent alphanumerics, so it is at least
# two characters long. The lookahead only scans that label.
_DOMAIN_LAST_PART_REGEX = rf"(?=[^.]*{_ALNUM}{{2}}){_DOMAIN_PART_REGEX}"
_DOMAIN_REGEX = rf"({_DOMAIN_PART_REGEX}\.)*{_DOMAIN_LAST_PART_REGEX}"


class Email(StringValueObject):
    """
    An email address of the form local-part@domain.

    Usage:
        Email(value="alice@example.com")  # Valid
        Email(value="alice@example")  # Valid, single-label domains are allowed
        Email(value="-alice@example.com")  # Raises ValidationError
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({_SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is "
        "made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    VALIDATION_REGEX: ClassVar[str] = f"{_LOCAL_PART_REGEX}@{_DOMAIN_REGEX}"
    REGEX_FLAGS: ClassVar[int] = re.ASCII
    FIELD_NAME: ClassVar[str] = "email"


# --- Address ---
class Address(StringValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Addresses can take any values, and it should not be blank"
    )
    # The first character must not be a whitespace, otherwise " " (a blank
    # string) becomes a valid input.
    VALIDATION_REGEX: ClassVar[str] = r"[^\s].*"
    FIELD_NAME: ClassVar[str] = "address"


class Person(Record):
    """
    A contact in the address book.

    Two people are the same person when their names match; every other field
    is data.
    """

    IDENTITY_FIELDS: ClassVar[tuple[str, ...]] = ("name",)

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    def is_same_person(self, other: Person | None) -> bool:
        """Return True if both people have the same name."""
        return self.is_same(other)
