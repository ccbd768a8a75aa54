"""User-facing error taxonomy.

Every error carries the message shown to the user. All of them are
recoverable: the session reports the message and keeps going.
"""


class TaskyError(Exception):
    """Base class for errors reported back to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownCommand(TaskyError):
    """Input matched no recognized command keyword."""

    def __init__(self):
        super().__init__("OOPS!!! I'm sorry, but I don't know what that means :-(")


class MalformedCommand(TaskyError):
    """Index command with the wrong token count or a non-integer index."""


class IndexOutOfRange(TaskyError):
    """Index command pointing outside the current list."""

    def __init__(self):
        super().__init__("OOPS!!! The task you entered is not in the list")


class EmptyDescription(TaskyError):
    """todo/deadline/event with nothing after the keyword."""

    def __init__(self, article_noun: str):
        super().__init__(f"OOPS!!! The description of {article_noun} cannot be empty.")


class MissingArgument(TaskyError):
    """A required /by, /from or /to marker is absent."""


class StorageError(TaskyError):
    """Raised when tasks cannot be written to storage."""

    def __init__(self, reason: str):
        super().__init__(f"OOPS!!! I couldn't save your tasks: {reason}")
