"""Pure task domain model - no I/O dependencies."""

import re
from dataclasses import dataclass
from enum import Enum

FIELD_SEPARATOR = " | "

# Backslash, the separator's pipe, and everything str.splitlines() breaks on
_NEEDS_ESCAPE = re.compile(r"[\\|\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029]")
_ESCAPE_SEQUENCE = re.compile(r"\\u([0-9a-f]{4})")


def escape_field(value: str) -> str:
    """Replace special characters with \\uXXXX sequences."""
    return _NEEDS_ESCAPE.sub(lambda m: f"\\u{ord(m.group()):04x}", value)


def unescape_field(value: str) -> str:
    return _ESCAPE_SEQUENCE.sub(lambda m: chr(int(m.group(1), 16)), value)


class TaskKind(Enum):
    """Closed set of task variants, valued by their tag."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


_PAYLOAD_FIELDS = {TaskKind.TODO: 0, TaskKind.DEADLINE: 1, TaskKind.EVENT: 2}


@dataclass
class Task:
    """A tracked task.

    Shared fields plus the payload of its variant: ``by`` for deadlines,
    ``start``/``end`` for events. Build instances with :meth:`todo`,
    :meth:`deadline` or :meth:`event`. No validation happens here; callers
    check for empty fields before construction.
    """

    kind: TaskKind
    description: str
    done: bool = False
    by: str = ""
    start: str = ""
    end: str = ""

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, by: str) -> "Task":
        return cls(kind=TaskKind.DEADLINE, description=description, by=by)

    @classmethod
    def event(cls, description: str, start: str, end: str) -> "Task":
        return cls(kind=TaskKind.EVENT, description=description, start=start, end=end)

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_as_done(self) -> None:
        self.done = True

    def mark_as_not_done(self) -> None:
        self.done = False

    def __str__(self) -> str:
        head = f"[{self.kind.value}][{self.status_icon}] {self.description}"
        match self.kind:
            case TaskKind.TODO:
                return head
            case TaskKind.DEADLINE:
                return f"{head} (by: {self.by})"
            case TaskKind.EVENT:
                return f"{head} (from: {self.start} to: {self.end})"

    def to_line(self) -> str:
        """Serialize to the one-line storage format.

        Each field is escaped, so the separator and line breaks inside a
        field never reach the line itself.
        """
        fields = [self.kind.value, "1" if self.done else "0", self.description]
        match self.kind:
            case TaskKind.TODO:
                pass
            case TaskKind.DEADLINE:
                fields.append(self.by)
            case TaskKind.EVENT:
                fields.extend([self.start, self.end])
        return FIELD_SEPARATOR.join(escape_field(f) for f in fields)

    @classmethod
    def from_line(cls, line: str) -> "Task":
        """Parse a line written by :meth:`to_line`. Raises ValueError on malformed input."""
        parts = [unescape_field(p) for p in line.rstrip("\n").split(FIELD_SEPARATOR)]
        if len(parts) < 3:
            raise ValueError(f"Invalid task line: {line!r}")

        tag, flag, description, *payload = parts
        kind = TaskKind(tag)
        if flag not in ("0", "1"):
            raise ValueError(f"Invalid done flag {flag!r} in line: {line!r}")
        if len(payload) != _PAYLOAD_FIELDS[kind]:
            raise ValueError(f"Wrong field count for {kind.name.lower()}: {line!r}")

        match kind:
            case TaskKind.TODO:
                task = cls.todo(description)
            case TaskKind.DEADLINE:
                task = cls.deadline(description, payload[0])
            case TaskKind.EVENT:
                task = cls.event(description, payload[0], payload[1])

        task.done = flag == "1"
        return task

    def to_dict(self) -> dict:
        data = {"kind": self.kind.name.lower(), "done": self.done, "description": self.description}
        if self.kind is TaskKind.DEADLINE:
            data["by"] = self.by
        elif self.kind is TaskKind.EVENT:
            data["from"] = self.start
            data["to"] = self.end
        return data
