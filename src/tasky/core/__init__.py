"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskKind
from .task_list import TaskList
from .commands import Command, CommandKind, classify, parse
from .errors import (
    TaskyError,
    UnknownCommand,
    MalformedCommand,
    IndexOutOfRange,
    EmptyDescription,
    MissingArgument,
    StorageError,
)

__all__ = [
    # Tasks
    "Task",
    "TaskKind",
    "TaskList",
    # Commands
    "Command",
    "CommandKind",
    "classify",
    "parse",
    # Errors
    "TaskyError",
    "UnknownCommand",
    "MalformedCommand",
    "IndexOutOfRange",
    "EmptyDescription",
    "MissingArgument",
    "StorageError",
]
