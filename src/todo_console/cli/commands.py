# src/todo_console/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.ports import Prompter
from ..core.state import AppState
from ..tasks.errors import TaskError
from ..tasks.task_codec import DATE_FORMAT
from ..tasks.task_selection import ask_yes_no, select_task

MenuHandler = Callable[[AppState, Prompter], None]

EXIT_CHOICE = "0"

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered main-menu registry used by the console connector."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(self, key: str, handler: MenuHandler, label: str) -> None:
        key = key.strip()
        if key == EXIT_CHOICE:
            raise ValueError(f"Menu key {EXIT_CHOICE!r} is reserved for exit")
        self._handlers[key] = handler
        self._labels[key] = label

    def keys(self) -> list[str]:
        return list(self._handlers)

    def handle(self, state: AppState, choice: str, io: Prompter) -> bool:
        """
        Run the handler for `choice`.
        Returns False if the choice is not a registered menu entry.

        Task errors (validation, not found, storage) are shown to the user;
        anything else is logged and reported as an internal error.
        """
        handler = self._handlers.get(choice.strip())
        if handler is None:
            return False

        try:
            handler(state, io)
        except TaskError as e:
            logger.info("Menu command %s failed: %s", choice, e)
            io.error(str(e))
        except Exception:
            logger.exception("Menu command %s crashed.", choice)
            io.error("Internal error while handling the command.")
        return True

    def invalid_choice_message(self) -> str:
        keys = sorted(self._handlers, key=lambda k: (len(k), k))
        if not keys:
            return f"Invalid choice! Please enter {EXIT_CHOICE}."
        return f"Invalid choice! Please enter a number between {EXIT_CHOICE} and {keys[-1]}."

    def build_menu(self) -> str:
        lines = ["To-Do List", "-" * 26]
        for key, label in self._labels.items():
            lines.append(f"{key}. {label}")
        lines.append(f"{EXIT_CHOICE}. Exit")
        lines.append("-" * 26)
        return "\n".join(lines)


registry = MenuRegistry()


def cmd_add(state: AppState, io: Prompter) -> None:
    description = io.ask("Enter task description: ")
    if description is None:
        io.info("Operation cancelled.")
        return
    task = state.task_store.add(description)
    logger.debug("Added task id=%s from console", task.id)
    io.success("Task added successfully.")


def cmd_view_all(state: AppState, io: Prompter) -> None:
    tasks = state.task_store.list_all()
    if not tasks:
        io.warning("No tasks to display.")
        return
    io.show_tasks(tasks, "All Tasks")


def cmd_view_active(state: AppState, io: Prompter) -> None:
    tasks = state.task_store.list_active()
    if not tasks:
        io.warning("No active tasks to display.")
        return
    io.show_tasks(tasks, "Active Tasks")


def cmd_view_completed(state: AppState, io: Prompter) -> None:
    tasks = state.task_store.list_completed()
    if not tasks:
        io.warning("No completed tasks to display.")
        return
    io.show_tasks(tasks, "Completed Tasks")


def cmd_complete(state: AppState, io: Prompter) -> None:
    selection = select_task(state.task_store.list_active(), "complete", io)
    if not selection.selected or selection.task is None:
        return
    state.task_store.complete(selection.task.id)
    io.success("Task marked as complete.")


def cmd_remove(state: AppState, io: Prompter) -> None:
    selection = select_task(state.task_store.list_all(), "remove", io)
    if not selection.selected or selection.task is None:
        return

    task = selection.task
    if not ask_yes_no(io, f'Are you sure you want to delete "{task.description}"? (y/n): '):
        io.info("Operation cancelled.")
        return

    state.task_store.remove(task.id)
    io.success("Task removed successfully.")


def cmd_edit(state: AppState, io: Prompter) -> None:
    selection = select_task(state.task_store.list_all(), "edit", io)
    if not selection.selected or selection.task is None:
        return

    task = selection.task
    new_description = io.ask(f'Enter new description for "{task.description}": ')
    if new_description is None:
        io.info("Operation cancelled.")
        return
    if not new_description.strip():
        io.error("Task description cannot be empty.")
        return

    if not ask_yes_no(io, f"Save changes to task [{task.id}]? (y/n): "):
        io.info("Operation cancelled.")
        return

    state.task_store.edit(task.id, new_description)
    io.success("Task updated successfully.")


def cmd_reschedule(state: AppState, io: Prompter) -> None:
    """
    Change the due date of an active task.
    Blank input keeps the current date.
    """
    selection = select_task(state.task_store.list_active(), "reschedule", io)
    if not selection.selected or selection.task is None:
        return

    task = selection.task
    while True:
        raw = io.ask("Enter new due date (yyyy-MM-dd HH:mm), or leave blank to keep it: ")
        if raw is None or not raw.strip():
            io.info("Operation cancelled.")
            return
        try:
            due_at = datetime.strptime(raw.strip(), DATE_FORMAT)
        except ValueError:
            io.error("Invalid date. Use the format yyyy-MM-dd HH:mm.")
            continue
        break

    state.task_store.reschedule(task.id, due_at)
    io.success(f"Task [{task.id}] is now due {due_at.strftime(DATE_FORMAT)}.")


registry.register("1", cmd_add, "Add Task")
registry.register("2", cmd_view_all, "View All Tasks")
registry.register("3", cmd_view_active, "View All Active Tasks")
registry.register("4", cmd_view_completed, "View All Completed Tasks")
registry.register("5", cmd_complete, "Mark Task As Complete")
registry.register("6", cmd_remove, "Remove Task")
registry.register("7", cmd_edit, "Edit Task")
registry.register("8", cmd_reschedule, "Change Due Date")
