# src/todo_console/tasks/task_models.py

from __future__ import annotations

from datetime import datetime, timedelta

DEFAULT_DUE_DELTA = timedelta(hours=1)
DISPLAY_DATE_FORMAT = "%Y-%m-%d %H:%M"


def default_due_at(now: datetime | None = None) -> datetime:
    """Due date used when none (or an unusable one) is known: one hour from now."""
    if now is None:
        now = datetime.now()
    return now + DEFAULT_DUE_DELTA


class Task:
    """
    One to-do item.

    Notes:
    - `id` is assigned once by the store and never changes.
    - `description` is validated by the store before a Task is built;
      construction itself never fails.
    - `due_at` ignores the very first value it is given and stores now+1h
      instead. Later assignments are stored verbatim. Loaders that want a
      stored date back must assign it a second time.
    """

    __slots__ = ("_id", "description", "completed", "_due_at", "_due_set")

    def __init__(
        self,
        task_id: int,
        description: str,
        *,
        completed: bool = False,
        due_at: datetime | None = None,
    ) -> None:
        self._id = int(task_id)
        self.description = description
        self.completed = completed
        self._due_set = False
        self._due_at = default_due_at()
        self.due_at = due_at

    @property
    def id(self) -> int:
        return self._id

    @property
    def due_at(self) -> datetime:
        return self._due_at

    @due_at.setter
    def due_at(self, value: datetime | None) -> None:
        if not self._due_set:
            self._due_set = True
            self._due_at = default_due_at()
            return
        if value is None:
            return
        self._due_at = value

    def to_display_string(self) -> str:
        done = " (Completed)" if self.completed else ""
        return f"[{self._id}] {self.description}{done} {self._due_at.strftime(DISPLAY_DATE_FORMAT)}"

    def __repr__(self) -> str:
        return (
            f"Task(id={self._id!r}, description={self.description!r}, "
            f"completed={self.completed!r}, due_at={self._due_at!r})"
        )
