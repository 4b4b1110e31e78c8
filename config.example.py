# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "TODO_DATA_DIR": "Local data directory for the task file and todo.log (default: .local/todo).",
    "TODO_TASKS_FILE": "Task file path (default: <data_dir>/tasks.txt).",
    # Console
    "TODO_USER_NAME": "Name used in the greeting when none is entered (default: User).",
    "TODO_COLOR": "Colored output (true/false). Defaults to off when NO_COLOR is set.",
    "TODO_CLEAR_SCREEN": "Clear the screen before showing the menu (true/false).",
    "TODO_PAUSE_AFTER_COMMAND": "Wait for Enter after each command (true/false).",
}
