"""Command session - owns the task list and applies commands to it."""

import logging
from dataclasses import dataclass

from .core import responses
from .core.commands import Command, CommandKind, parse
from .core.errors import IndexOutOfRange, StorageError, TaskyError
from .core.task_list import TaskList
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    """Text to show the user, and whether the session is over."""

    text: str
    exit: bool = False
    ok: bool = True


class Session:
    """
    A single user's conversation with the task list.

    Loads tasks from the store on creation and saves after every successful
    mutation. Errors from parsing or validation are turned into reply text
    here; the list and the store are untouched when a command fails.
    """

    def __init__(self, store: TaskStore, tasks: TaskList | None = None):
        self.store = store
        self.tasks = tasks if tasks is not None else store.load()

    def greet(self) -> str:
        return responses.intro()

    def handle_command(self, raw: str) -> Reply:
        """Handle one line of input and return the reply."""
        logger.debug(f"Handling command: {raw!r}")
        try:
            command = parse(raw)
            return self._apply(command)
        except StorageError as e:
            # The in-memory change stands; only the write failed
            return Reply(responses.error(e), ok=False)
        except TaskyError as e:
            logger.debug(f"Rejected command {raw!r}: {e.message}")
            return Reply(responses.error(e), ok=False)

    def _apply(self, command: Command) -> Reply:
        tasks = self.tasks
        match command.kind:
            case CommandKind.BYE:
                self.store.save(tasks)
                return Reply(responses.farewell(), exit=True)
            case CommandKind.LIST:
                return Reply(responses.render_list(tasks))
            case CommandKind.FIND:
                return Reply(responses.render_matches(tasks.find(command.keyword)))
            case CommandKind.DELETE:
                self._check_index(command.index)
                removed = tasks.delete(command.index)
                self.store.save(tasks)
                return Reply(responses.removed(tasks, removed))
            case CommandKind.MARK:
                self._check_index(command.index)
                tasks.get_task(command.index).mark_as_done()
                self.store.save(tasks)
                return Reply(responses.marked(tasks, command.index))
            case CommandKind.UNMARK:
                self._check_index(command.index)
                tasks.get_task(command.index).mark_as_not_done()
                self.store.save(tasks)
                return Reply(responses.unmarked(tasks, command.index))
            case CommandKind.TODO | CommandKind.DEADLINE | CommandKind.EVENT:
                tasks.add(command.task)
                self.store.save(tasks)
                logger.info(f"Added {command.kind.keyword}: {command.task.description}")
                return Reply(responses.added(tasks, command.task))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.tasks.get_size():
            raise IndexOutOfRange()
