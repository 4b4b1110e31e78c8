# src/todo_console/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from ..cli.commands import EXIT_CHOICE, MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..tasks.task_models import Task
from ..tasks.task_selection import ask_yes_no

logger = logging.getLogger(__name__)

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"


class ConsoleIO:
    """
    Prompter implementation for a real terminal.

    Colors are plain ANSI escapes and are only emitted when enabled
    and stdout is a TTY.
    """

    def __init__(
        self,
        *,
        color: bool = True,
        stdout: TextIO | None = None,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self._out = stdout if stdout is not None else sys.stdout
        self._input = input_fn
        try:
            is_tty = self._out.isatty()
        except Exception:
            is_tty = False
        self._tty = is_tty
        self._color = color and is_tty

    def _paint(self, text: str, code: str) -> str:
        if not self._color:
            return text
        return f"{code}{text}{RESET}"

    def write(self, text: str = "") -> None:
        print(text, file=self._out, flush=True)

    def clear(self) -> None:
        if self._tty:
            self._out.write("\033[H\033[2J")
            self._out.flush()

    # ---- Prompter ----

    def ask(self, prompt: str) -> str | None:
        try:
            return self._input(prompt)
        except EOFError:
            self.write()
            return None

    def show_tasks(self, tasks: Sequence[Task], title: str) -> None:
        self.write(f"--- {title.upper()} ---\n")

        pending = completed = 0
        for task in tasks:
            if task.completed:
                completed += 1
                self.write(self._paint(task.to_display_string(), GREEN))
            else:
                pending += 1
                self.write(self._paint(task.to_display_string(), YELLOW))

        self.write(f"\nPending: {pending} | Completed: {completed}\n")
        if pending + completed == 0:
            self.write("No tasks to display.")

    def success(self, text: str) -> None:
        self.write(self._paint(text, GREEN))

    def warning(self, text: str) -> None:
        self.write(self._paint(text, YELLOW))

    def error(self, text: str) -> None:
        self.write(self._paint(text, RED))

    def info(self, text: str) -> None:
        self.write(self._paint(text, CYAN))


def completion_announcer(io: ConsoleIO) -> Callable[[Task], None]:
    def _announce(task: Task) -> None:
        io.success(f"\n[EVENT] Task '{task.description}' (ID: {task.id}) completed.")

    return _announce


def _ask_user_name(state: AppState, io: ConsoleIO) -> None:
    name = io.ask("Please enter your name: ")
    if name is not None and name.strip():
        state.user_name = name.strip()


def run_console_loop(
    state: AppState,
    io: ConsoleIO | None = None,
    *,
    registry: MenuRegistry | None = None,
) -> None:
    settings = state.settings
    if io is None:
        io = ConsoleIO(color=bool(getattr(settings, "color_enabled", True)))
    if registry is None:
        registry = menu_registry

    clear_screen = bool(getattr(settings, "clear_screen", True))
    pause = bool(getattr(settings, "pause_after_command", True))

    announce = completion_announcer(io)
    state.task_store.add_completed_listener(announce)
    logger.info("Console connector started (user=%s).", state.user_name)

    try:
        _ask_user_name(state, io)

        while True:
            if clear_screen:
                io.clear()
            io.write(f"Welcome, {state.user_name}!\n")
            io.write(registry.build_menu())

            try:
                choice = io.ask("Enter your choice: ")
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                io.write()
                break
            if choice is None:
                logger.info("Console EOF received, exiting.")
                break

            choice = choice.strip()
            if choice == EXIT_CHOICE:
                if ask_yes_no(io, "Are you sure you want to exit? (y/n): "):
                    io.write("Goodbye!")
                    logger.info("Console exit confirmed.")
                    break
                continue

            try:
                known = registry.handle(state, choice, io)
            except KeyboardInterrupt:
                io.write()
                io.info("Operation cancelled.")
                known = True

            if not known:
                io.error(registry.invalid_choice_message())

            if pause and io.ask("\nPress Enter to continue...") is None:
                logger.info("Console EOF received, exiting.")
                break
    finally:
        state.task_store.remove_completed_listener(announce)
        logger.info("Console connector finished.")
