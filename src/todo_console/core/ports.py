# src/todo_console/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The selection workflow and the menu commands depend on Protocols instead of
the console. This keeps the presentation swappable and makes testing easier.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, Protocol

TaskCompletedHandler = Callable[[Any], None]
# Receives the Task that was just completed.


class Prompter(Protocol):
    """
    Presentation-side port: line-based input plus categorized output.

    ask() returns None when input is exhausted (EOF / Ctrl+D).
    """

    def ask(self, prompt: str) -> str | None: ...

    def show_tasks(self, tasks: Sequence[Any], title: str) -> None: ...

    def success(self, text: str) -> None: ...
    def warning(self, text: str) -> None: ...
    def error(self, text: str) -> None: ...
    def info(self, text: str) -> None: ...


class TaskRepo(Protocol):
    # Queries
    def list_active(self) -> Sequence[Any]: ...
    def list_completed(self) -> Sequence[Any]: ...
    def list_all(self) -> Sequence[Any]: ...
    def get(self, task_id: int) -> Any | None: ...
    def count_tasks(self) -> int: ...

    # Mutations
    def add(self, description: str | None, due_at: datetime | None = None) -> Any: ...
    def complete(self, task_id: int) -> Any: ...
    def remove(self, task_id: int) -> None: ...
    def edit(self, task_id: int, new_description: str | None) -> Any: ...
    def reschedule(self, task_id: int, due_at: datetime) -> Any: ...

    # Notifications
    def add_completed_listener(self, handler: TaskCompletedHandler) -> None: ...
    def remove_completed_listener(self, handler: TaskCompletedHandler) -> None: ...
