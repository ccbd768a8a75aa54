"""Ordered task collection - no I/O dependencies."""

from collections.abc import Iterable, Iterator

from .tasks import Task


class TaskList:
    """Mutable, ordered list of tasks.

    Indices are 0-based here; the 1-based numbering users see is handled
    by the command layer.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    def add(self, task: Task) -> "TaskList":
        """Append a task; returns the list for chaining."""
        self._tasks.append(task)
        return self

    def delete(self, index: int) -> Task:
        """Remove and return the task at index. Raises IndexError if out of range."""
        self._check_index(index)
        return self._tasks.pop(index)

    def get_task(self, index: int) -> Task:
        """Task at index. Raises IndexError if out of range."""
        self._check_index(index)
        return self._tasks[index]

    def get_size(self) -> int:
        return len(self._tasks)

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains keyword (case-sensitive), in order.

        An empty keyword matches every task. Returns a new list.
        """
        return [t for t in self._tasks if keyword in t.description]

    def _check_index(self, index: int) -> None:
        # Reject negatives explicitly, list indexing would wrap around
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index {index} out of range [0, {len(self._tasks)})")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
