"""Top-level pytest configuration for classbook."""

import os

import pytest

from classbook.config.settings import get_settings
from classbook.domain.task import Task, TaskDescription, TaskName, TaskPriority


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Drop CLASSBOOK_* variables and cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("CLASSBOOK_") or key in ("ENVIRONMENT", "ENV"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def homework_task() -> Task:
    return Task(
        name=TaskName(value="Read chapter 3"),
        description=TaskDescription(value="homework"),
        priority=TaskPriority(value="high"),
    )


@pytest.fixture
def revision_task() -> Task:
    return Task(
        name=TaskName(value="Revise algebra"),
        description=TaskDescription(value="revision"),
    )
