"""File-based task storage adapter."""

import logging
import os
from pathlib import Path

from tasky.core.errors import StorageError
from tasky.core.task_list import TaskList
from tasky.core.tasks import Task

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    Plain-text task storage.

    Implements TaskStore protocol. One task per line in the format written
    by Task.to_line.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> TaskList:
        """Load tasks, skipping lines that cannot be parsed."""
        tasks = TaskList()
        if not self.path.exists():
            logger.info(f"No task file at {self.path}, starting with an empty list")
            return tasks

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to read {self.path}: {e}")
            return tasks

        for lineno, line in enumerate(content.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                tasks.add(Task.from_line(line))
            except ValueError as e:
                logger.warning(f"Skipping corrupt line {lineno} in {self.path}: {e}")

        logger.info(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Write all tasks, replacing the file atomically."""
        content = "".join(f"{task.to_line()}\n" for task in tasks)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to save tasks to {self.path}: {e}")
            raise StorageError(str(e)) from e
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
