# src/todo_console/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .errors import NotFoundError, StorageError, ValidationError
from .task_codec import FIELD_SEPARATOR
from .task_file import TaskFile
from .task_models import Task

logger = logging.getLogger(__name__)

TaskCompletedHandler = Callable[[Task], None]


def _clean_description(description: str | None) -> str:
    if description is None or not description.strip():
        raise ValidationError("Task description cannot be empty.")
    if FIELD_SEPARATOR in description:
        raise ValidationError(f"Task description cannot contain '{FIELD_SEPARATOR}'.")
    if "\n" in description or "\r" in description:
        raise ValidationError("Task description must be a single line.")
    return description.strip()


class TaskStore:
    """
    In-memory task store backed by a flat text file.

    Owns two ordered collections (active, completed) and the id counter.
    The file is loaded once on construction. After that:
    - add appends one line
    - complete/remove/edit/reschedule rewrite the whole file
      (active tasks first, then completed)

    If a write fails the in-memory change is undone and StorageError
    propagates, so memory and file never disagree after an operation.
    The id counter is never rolled back.
    """

    def __init__(
        self,
        path: str | Path = "tasks.txt",
        *,
        task_file: TaskFile | None = None,
    ) -> None:
        self._file = task_file if task_file is not None else TaskFile(path)
        self._active: list[Task] = []
        self._completed: list[Task] = []
        self._next_id = 1
        self._completed_handlers: list[TaskCompletedHandler] = []
        self._load()
        logger.info(
            "TaskStore ready file=%s active=%d completed=%d next_id=%d",
            self._file.path,
            len(self._active),
            len(self._completed),
            self._next_id,
        )

    # ---- loading ----

    def _load(self) -> None:
        seen: set[int] = set()
        for task in self._file.load():
            if task.id in seen:
                logger.debug("Skipping duplicate task id=%s in %s", task.id, self._file.path)
                continue
            seen.add(task.id)
            if task.completed:
                self._completed.append(task)
            else:
                self._active.append(task)
        self._next_id = max(seen, default=0) + 1

    # ---- internals ----

    def _find(self, task_id: int) -> tuple[list[Task], int] | None:
        for bucket in (self._active, self._completed):
            for idx, task in enumerate(bucket):
                if task.id == task_id:
                    return bucket, idx
        return None

    def _require(self, task_id: int) -> Task:
        task = self.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def _rewrite(self) -> None:
        self._file.rewrite(self._active + self._completed)

    # ---- listeners ----

    def add_completed_listener(self, handler: TaskCompletedHandler) -> None:
        self._completed_handlers.append(handler)

    def remove_completed_listener(self, handler: TaskCompletedHandler) -> None:
        with contextlib.suppress(ValueError):
            self._completed_handlers.remove(handler)

    def _notify_completed(self, task: Task) -> None:
        for handler in list(self._completed_handlers):
            try:
                handler(task)
            except Exception:
                logger.exception("Task completed handler failed task_id=%s", task.id)

    # ---- queries ----

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def path(self) -> Path:
        return self._file.path

    def list_active(self) -> tuple[Task, ...]:
        return tuple(self._active)

    def list_completed(self) -> tuple[Task, ...]:
        return tuple(self._completed)

    def list_all(self) -> tuple[Task, ...]:
        return tuple(self._active + self._completed)

    def get(self, task_id: int) -> Task | None:
        found = self._find(task_id)
        if found is None:
            return None
        bucket, idx = found
        return bucket[idx]

    def count_tasks(self) -> int:
        return len(self._active) + len(self._completed)

    # ---- mutations ----

    def add(self, description: str | None, due_at: datetime | None = None) -> Task:
        text = _clean_description(description)

        task = Task(self._next_id, text, due_at=due_at)
        self._next_id += 1
        self._active.append(task)
        try:
            self._file.append(task)
        except StorageError:
            self._active.remove(task)
            raise

        logger.debug("Task added id=%s due_at=%s", task.id, task.due_at)
        return task

    def complete(self, task_id: int) -> Task:
        idx = next((i for i, t in enumerate(self._active) if t.id == task_id), None)
        if idx is None:
            raise NotFoundError(task_id, "active tasks")

        task = self._active.pop(idx)
        task.completed = True
        self._completed.append(task)
        try:
            self._rewrite()
        except StorageError:
            self._completed.pop()
            task.completed = False
            self._active.insert(idx, task)
            raise

        logger.debug("Task completed id=%s", task.id)
        self._notify_completed(task)
        return task

    def remove(self, task_id: int) -> None:
        found = self._find(task_id)
        if found is None:
            raise NotFoundError(task_id)

        bucket, idx = found
        task = bucket.pop(idx)
        try:
            self._rewrite()
        except StorageError:
            bucket.insert(idx, task)
            raise

        logger.debug("Task removed id=%s", task_id)

    def edit(self, task_id: int, new_description: str | None) -> Task:
        task = self._require(task_id)
        text = _clean_description(new_description)

        previous = task.description
        task.description = text
        try:
            self._rewrite()
        except StorageError:
            task.description = previous
            raise

        logger.debug("Task edited id=%s", task_id)
        return task

    def reschedule(self, task_id: int, due_at: datetime) -> Task:
        task = self._require(task_id)

        previous = task.due_at
        task.due_at = due_at
        try:
            self._rewrite()
        except StorageError:
            task.due_at = previous
            raise

        logger.debug("Task rescheduled id=%s due_at=%s", task_id, due_at)
        return task
