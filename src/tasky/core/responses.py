"""Reply text builders - pure functions, no I/O."""

from collections.abc import Iterable

from .errors import TaskyError
from .task_list import TaskList
from .tasks import Task

INTRO = "Hello! I'm Tasky\nWhat can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"


def intro() -> str:
    return INTRO


def farewell() -> str:
    return FAREWELL


def format_task_lines(tasks: Iterable[Task]) -> list[str]:
    """Number tasks from 1 in the order given."""
    return [f"{i}.{task}" for i, task in enumerate(tasks, start=1)]


def render_list(tasks: TaskList) -> str:
    if not len(tasks):
        return "Your list is empty. Add a todo, deadline or event to get started."
    return "\n".join(["Here are the tasks in your list:", *format_task_lines(tasks)])


def render_matches(matches: list[Task]) -> str:
    if not matches:
        return "No matching tasks found in your list."
    return "\n".join(["Here are the matching tasks in your list:", *format_task_lines(matches)])


def count_line(tasks: TaskList) -> str:
    size = len(tasks)
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


def added(tasks: TaskList, task: Task) -> str:
    return f"Got it. I've added this task:\n  {task}\n{count_line(tasks)}"


def removed(tasks: TaskList, task: Task) -> str:
    return f"Noted. I've removed this task:\n  {task}\n{count_line(tasks)}"


def marked(tasks: TaskList, index: int) -> str:
    return f"Nice! I've marked this task as done:\n  {tasks.get_task(index)}"


def unmarked(tasks: TaskList, index: int) -> str:
    return f"OK, I've marked this task as not done yet:\n  {tasks.get_task(index)}"


def error(exc: TaskyError) -> str:
    return exc.message
