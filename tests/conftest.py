# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_console.core.state import AppState
from todo_console.tasks.task_store import TaskStore

from .fakes import FakePrompter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=data_dir,
        tasks_file_path=data_dir / "tasks.txt",
        default_user_name="User",
        color_enabled=False,
        clear_screen=False,
        pause_after_command=False,
    )


@pytest.fixture()
def tasks_path(settings: SimpleNamespace) -> Path:
    return settings.tasks_file_path


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    """Real file-backed store on a per-test tmp file."""
    return TaskStore(tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, user_name="User")


@pytest.fixture()
def prompter() -> FakePrompter:
    return FakePrompter()
