# tests/test_task_file.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from todo_console.tasks.errors import StorageError
from todo_console.tasks.task_file import TaskFile
from todo_console.tasks.task_models import Task


def _task(task_id: int, description: str, completed: bool = False) -> Task:
    t = Task(task_id, description, completed=completed)
    t.due_at = datetime(2024, 1, 1, 10, 0)
    return t


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert TaskFile(tmp_path / "nope.txt").load() == []


def test_malformed_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "1|First|False|2024-01-01 10:00\n"
        "this line is broken\n"
        "\n"
        "2|Second|True|2024-01-02 11:30\n",
        "utf-8",
    )

    tasks = TaskFile(path).load()
    assert [t.id for t in tasks] == [1, 2]
    assert tasks[1].completed is True


def test_append_creates_file_and_parent(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.txt"
    tf = TaskFile(path)

    tf.append(_task(1, "A"))
    tf.append(_task(2, "B"))

    assert path.read_text("utf-8") == (
        "1|A|False|2024-01-01 10:00\n"
        "2|B|False|2024-01-01 10:00\n"
    )


def test_rewrite_replaces_contents(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("1|Old|False|2024-01-01 10:00\n2|Gone|False|2024-01-01 10:00\n", "utf-8")
    tf = TaskFile(path)

    tf.rewrite([_task(1, "Old"), _task(3, "Done", completed=True)])

    assert path.read_text("utf-8") == (
        "1|Old|False|2024-01-01 10:00\n"
        "3|Done|True|2024-01-01 10:00\n"
    )
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_unicode_description_survives(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    tf = TaskFile(path)
    tf.append(_task(1, "Купить молоко ☕"))

    (loaded,) = tf.load()
    assert loaded.description == "Купить молоко ☕"


def test_io_failures_raise_storage_error(tmp_path: Path) -> None:
    # A directory where the file should be: read, append and rewrite all fail.
    path = tmp_path / "tasks.txt"
    path.mkdir()
    tf = TaskFile(path)

    with pytest.raises(StorageError):
        tf.load()
    with pytest.raises(StorageError):
        tf.append(_task(1, "A"))
    with pytest.raises(StorageError) as excinfo:
        tf.rewrite([_task(1, "A")])

    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, OSError)
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_append_after_unterminated_last_line(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("5|Old task|True|2024-01-01 10:00", "utf-8")
    tf = TaskFile(path)

    tf.append(_task(6, "Buy milk"))

    assert path.read_text("utf-8") == (
        "5|Old task|True|2024-01-01 10:00\n"
        "6|Buy milk|False|2024-01-01 10:00\n"
    )
    assert [t.id for t in tf.load()] == [5, 6]


def test_undecodable_line_is_skipped(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(
        b"1|Good|False|2024-01-01 10:00\n"
        b"2|Bad \xff|False|2024-01-01 10:00\n"
        b"3|Good2|True|2024-01-01 10:00\n"
    )

    tasks = TaskFile(path).load()
    assert [t.id for t in tasks] == [1, 3]
