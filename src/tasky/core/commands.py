"""Command parsing - turns one line of user input into a typed command.

Pure functions, no I/O. Classification walks CommandKind in declaration
order and the first matching keyword wins. Keywords are matched
case-insensitively at position 0; the /by, /from and /to markers inside a
command body are literal, case-sensitive substrings.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import EmptyDescription, MalformedCommand, MissingArgument, UnknownCommand
from .tasks import Task

_INDEX_TOKEN = re.compile(r"[+-]?[0-9]+")


class CommandKind(Enum):
    """Recognized commands, in matching precedence order."""

    BYE = ("bye", True)
    DELETE = ("delete", False)
    LIST = ("list", True)
    FIND = ("find", False)
    MARK = ("mark", False)
    UNMARK = ("unmark", False)
    TODO = ("todo", False)
    DEADLINE = ("deadline", False)
    EVENT = ("event", False)

    def __init__(self, keyword: str, exact: bool):
        self.keyword = keyword
        self.exact = exact

    def matches(self, raw: str) -> bool:
        lowered = raw.lower()
        if self.exact:
            return lowered == self.keyword
        return lowered.startswith(self.keyword)


@dataclass(frozen=True)
class Command:
    """A parsed command.

    ``index`` is 0-based and only set for delete/mark/unmark; it is not yet
    checked against the list bounds. ``keyword`` is set for find and
    ``task`` for todo/deadline/event.
    """

    kind: CommandKind
    index: int | None = None
    keyword: str = ""
    task: Task | None = None


def classify(raw: str) -> CommandKind:
    """Return the first CommandKind whose keyword matches raw."""
    for kind in CommandKind:
        if kind.matches(raw):
            return kind
    raise UnknownCommand()


def parse(raw: str) -> Command:
    """Classify raw input and extract its validated arguments."""
    kind = classify(raw)
    match kind:
        case CommandKind.BYE | CommandKind.LIST:
            return Command(kind)
        case CommandKind.DELETE | CommandKind.MARK | CommandKind.UNMARK:
            return Command(kind, index=parse_index(raw, kind))
        case CommandKind.FIND:
            return Command(kind, keyword=_body(raw, kind))
        case CommandKind.TODO:
            return Command(kind, task=parse_todo(raw))
        case CommandKind.DEADLINE:
            return Command(kind, task=parse_deadline(raw))
        case CommandKind.EVENT:
            return Command(kind, task=parse_event(raw))


def parse_index(raw: str, kind: CommandKind) -> int:
    """Zero-based index from '<keyword> <n>'."""
    tokens = split_literal(raw, " ")
    if len(tokens) != 2:
        raise MalformedCommand(f"OOPS!!! Please fill in the task I need to {kind.keyword}")

    token = tokens[1]
    if not _INDEX_TOKEN.fullmatch(token):
        raise MalformedCommand("OOPS!!! The task number must be a whole number")
    return int(token) - 1


def parse_todo(raw: str) -> Task:
    description = _body(raw, CommandKind.TODO)
    if not description:
        raise EmptyDescription("a todo")
    return Task.todo(description)


def parse_deadline(raw: str) -> Task:
    body = _body(raw, CommandKind.DEADLINE)
    if not body:
        raise EmptyDescription("a deadline")

    parts = split_literal(body, "/by")
    if len(parts) != 2 or not parts[1].strip():
        raise MissingArgument("OOPS!!! Please fill in the deadline")

    description = parts[0].strip()
    if not description:
        raise EmptyDescription("a deadline")
    return Task.deadline(description, parts[1].strip())


def parse_event(raw: str) -> Task:
    body = _body(raw, CommandKind.EVENT)
    if not body:
        raise EmptyDescription("an event")

    parts = split_literal(body, "/from")
    if len(parts) != 2 or not parts[1].strip():
        raise MissingArgument("OOPS!!! Please fill in the timings")

    description = parts[0].strip()
    if not description:
        raise EmptyDescription("an event")

    timing = split_literal(parts[1].strip(), "/to")
    if len(timing) != 2 or not timing[1].strip():
        raise MissingArgument("OOPS!!! Please fill in the time the event ends")
    if not timing[0].strip():
        raise MissingArgument("OOPS!!! Please fill in the time the event starts")

    return Task.event(description, timing[0].strip(), timing[1].strip())


def split_literal(text: str, marker: str) -> list[str]:
    """Split on a literal marker, dropping trailing empty pieces.

    "a /by" yields ["a "], not ["a ", ""], so a marker with nothing after
    it counts as missing.
    """
    parts = text.split(marker)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def _body(raw: str, kind: CommandKind) -> str:
    """Everything after the keyword, trimmed."""
    return raw[len(kind.keyword):].strip()
