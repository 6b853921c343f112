# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Task record and its value objects: TaskName, TaskDescription, TaskPriority.
"""

from __future__ import annotations

from typing import ClassVar

from classbook.domain.record import Record
from classbook.domain.value_object import StringValueObject


class TaskName(StringValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Task names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9][A-Za-z0-9 ]*"
    FIELD_NAME: ClassVar[str] = "task_name"


class TaskDescription(StringValueObject):
    """A single alphanumeric word describing a task."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Task descriptions should be alphanumeric"
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9]+"
    FIELD_NAME: ClassVar[str] = "task_description"


class TaskPriority(StringValueObject):
    """
    How urgent a task is: low, medium or high.

    Usage:
        TaskPriority(value="high").rank  # 2
    """

    LEVELS: ClassVar[tuple[str, ...]] = ("low", "medium", "high")
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Task priority should be one of: low, medium, high"
    )
    VALIDATION_REGEX: ClassVar[str] = "|".join(LEVELS)
    FIELD_NAME: ClassVar[str] = "task_priority"

    @property
    def rank(self) -> int:
        return self.LEVELS.index(self.value)


class Task(Record):
    """
    Represents a Task in the task list.
    Guarantees: details are present and not null, field values are validated, immutable.

    ``is_same_task`` compares name and description only, so a task stays the
    same task when it is marked done or re-prioritised. ``==`` compares every
    field, and ``hash`` covers the same fields.
    """

    IDENTITY_FIELDS: ClassVar[tuple[str, ...]] = ("name", "description")

    # Identity fields
    name: TaskName
    description: TaskDescription

    # Data fields
    is_done: bool = False
    priority: TaskPriority | None = None

    def is_same_task(self, other: Task | None) -> bool:
        """Return True if both tasks have the same name and description."""
        return self.is_same(other)

    def mark_done(self) -> Task:
        return self.with_changes(is_done=True)

    def mark_undone(self) -> Task:
        return self.with_changes(is_done=False)
