# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime, timedelta

from todo_console.tasks.task_codec import decode, encode
from todo_console.tasks.task_models import Task, default_due_at


def _task(task_id: int, description: str, *, completed: bool, due: datetime) -> Task:
    t = Task(task_id, description, completed=completed)
    t.due_at = due
    return t


def test_encode_format() -> None:
    t = _task(5, "Old task", completed=True, due=datetime(2024, 1, 1, 10, 0))
    assert encode(t) == "5|Old task|True|2024-01-01 10:00"

    t2 = _task(6, "New task", completed=False, due=datetime(2024, 12, 31, 23, 59))
    assert encode(t2) == "6|New task|False|2024-12-31 23:59"


def test_decode_reproduces_encoded_task() -> None:
    original = _task(42, "Call mom, then dentist", completed=True, due=datetime(2025, 3, 9, 7, 5, 44))
    back = decode(encode(original))

    assert back is not None
    assert back.id == 42
    assert back.description == "Call mom, then dentist"
    assert back.completed is True
    # minute precision
    assert back.due_at == datetime(2025, 3, 9, 7, 5)


def test_decode_known_line_with_newline() -> None:
    t = decode("5|Old task|True|2024-01-01 10:00\n")
    assert t is not None
    assert (t.id, t.description, t.completed) == (5, "Old task", True)
    assert t.due_at == datetime(2024, 1, 1, 10, 0)


def test_decode_rejects_unidentifiable_lines() -> None:
    assert decode("1|too|few") is None
    assert decode("1|a|b|True|2024-01-01 10:00") is None
    assert decode("x|Task|False|2024-01-01 10:00") is None
    assert decode("0|Task|False|2024-01-01 10:00") is None
    assert decode("3|   |False|2024-01-01 10:00") is None
    assert decode("") is None


def test_decode_lenient_fields_fall_back_to_defaults() -> None:
    before = default_due_at()
    t = decode("9|Water plants|maybe|not a date")

    assert t is not None
    assert t.completed is False
    assert abs(t.due_at - before) <= timedelta(seconds=5)


def test_decode_completed_is_case_insensitive() -> None:
    t = decode("2|Walk dog|true|2024-02-02 08:00")
    assert t is not None
    assert t.completed is True
