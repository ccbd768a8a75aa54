"""Task storage interface."""

from typing import Protocol

from tasky.core.task_list import TaskList


class TaskStore(Protocol):
    """Interface for persisting the task list."""

    def load(self) -> TaskList:
        """Load saved tasks. Returns an empty list if nothing is saved."""
        ...

    def save(self, tasks: TaskList) -> None:
        """Persist the whole list, replacing what was saved before."""
        ...
