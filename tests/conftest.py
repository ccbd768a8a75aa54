"""Shared fixtures."""

import pytest

from tasky.core.task_list import TaskList
from tasky.core.tasks import Task, TaskKind
from tasky.session import Session

from .fakes import FakeTaskStore


@pytest.fixture
def sample_tasks():
    """One task of each kind, second one done."""
    return [
        Task.todo("buy milk"),
        Task(kind=TaskKind.DEADLINE, description="submit report", done=True, by="Friday"),
        Task.event("project meeting", "Mon 2pm", "4pm"),
    ]


@pytest.fixture
def store():
    return FakeTaskStore()


@pytest.fixture
def session(store):
    return Session(store)


@pytest.fixture
def loaded_session(sample_tasks):
    store = FakeTaskStore(TaskList(sample_tasks))
    return Session(store)
