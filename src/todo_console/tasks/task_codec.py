# src/todo_console/tasks/task_codec.py

"""
One task per line of text:

    {id}|{description}|{completed}|{due_at:%Y-%m-%d %H:%M}

Parsing is lenient: a line that cannot identify a task (wrong field count,
bad id, empty description) is dropped; a bad `completed` or `due_at` falls
back to the defaults instead of rejecting the line.
"""

from __future__ import annotations

from datetime import datetime

from .task_models import Task

FIELD_SEPARATOR = "|"
DATE_FORMAT = "%Y-%m-%d %H:%M"
FIELD_COUNT = 4


def _format_bool(value: bool) -> str:
    return "True" if value else "False"


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() == "true"


def _parse_due(raw: str) -> datetime | None:
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT)
    except ValueError:
        return None


def encode(task: Task) -> str:
    return FIELD_SEPARATOR.join(
        (
            str(task.id),
            task.description,
            _format_bool(task.completed),
            task.due_at.strftime(DATE_FORMAT),
        )
    )


def decode(line: str) -> Task | None:
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        return None

    raw_id, description, raw_completed, raw_due = parts
    try:
        task_id = int(raw_id.strip())
    except ValueError:
        return None
    if task_id <= 0:
        return None

    if not description.strip():
        return None

    task = Task(task_id, description, completed=_parse_bool(raw_completed))
    due_at = _parse_due(raw_due)
    if due_at is not None:
        # Second assignment: this one is kept.
        task.due_at = due_at
    return task
