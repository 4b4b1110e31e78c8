# src/todo_console/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for task store failures."""


class ValidationError(TaskError):
    """Rejected user input (e.g. an empty description)."""


class NotFoundError(TaskError):
    def __init__(self, task_id: int, where: str = "task list") -> None:
        super().__init__(f"Task {task_id} not found in {where}.")
        self.task_id = task_id
        self.where = where


class StorageError(TaskError):
    """The backing file could not be read or written."""

    def __init__(self, path: str | Path, action: str) -> None:
        super().__init__(f"Failed to {action} task file {path}")
        self.path = Path(path)
        self.action = action
