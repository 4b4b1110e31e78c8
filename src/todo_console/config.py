# src/todo_console/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default; nothing is required to start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_file_path: Path

    # ---- Console ----
    default_user_name: str
    color_enabled: bool
    clear_screen: bool
    pause_after_command: bool

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_file_path = _env_path(_k("TASKS_FILE"), data_dir / "tasks.txt")

        default_user_name = _env(_k("USER_NAME"), "User").strip() or "User"
        # https://no-color.org: any non-empty NO_COLOR disables color unless TODO_COLOR says otherwise.
        color_enabled = _env_bool(_k("COLOR"), not os.getenv("NO_COLOR"))
        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)
        pause_after_command = _env_bool(_k("PAUSE_AFTER_COMMAND"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            default_user_name=default_user_name,
            color_enabled=color_enabled,
            clear_screen=clear_screen,
            pause_after_command=pause_after_command,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
