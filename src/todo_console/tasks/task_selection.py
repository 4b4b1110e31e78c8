# src/todo_console/tasks/task_selection.py

from __future__ import annotations

"""
Interactive selection of one task from a candidate list.

The caller supplies the candidates (e.g. active tasks for "complete",
all tasks for "remove") and a Prompter. The loop keeps asking until it gets
a listed id or an explicit cancel; bad input is reported and retried.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import Prompter
from .task_models import Task

logger = logging.getLogger(__name__)

CANCEL_WORDS = frozenset({"cancel", "c"})
YES_WORDS = frozenset({"y", "yes"})
NO_WORDS = frozenset({"n", "no"})


class SelectionOutcome(StrEnum):
    SELECTED = "selected"
    CANCELLED = "cancelled"
    NOTHING_TO_SELECT = "nothing_to_select"


@dataclass(slots=True, frozen=True)
class Selection:
    outcome: SelectionOutcome
    task: Task | None = None

    @property
    def selected(self) -> bool:
        return self.outcome is SelectionOutcome.SELECTED


def select_task(candidates: Sequence[Task], action: str, prompter: Prompter) -> Selection:
    tasks = list(candidates)
    if not tasks:
        prompter.warning(f"No tasks available to {action}.")
        return Selection(SelectionOutcome.NOTHING_TO_SELECT)

    prompter.show_tasks(tasks, f"Select a Task to {action}")
    by_id = {t.id: t for t in tasks}

    while True:
        raw = prompter.ask(f"Enter Task ID to {action} or type 'c' or 'cancel': ")
        if raw is None:
            logger.debug("Input closed during selection (action=%s)", action)
            return Selection(SelectionOutcome.CANCELLED)

        text = raw.strip()
        if not text:
            prompter.error("Input cannot be empty.")
            continue

        if text.lower() in CANCEL_WORDS:
            prompter.info("Operation cancelled.")
            return Selection(SelectionOutcome.CANCELLED)

        try:
            task_id = int(text)
        except ValueError:
            prompter.error("Invalid ID format. Please enter a numeric value.")
            continue

        task = by_id.get(task_id)
        if task is None:
            prompter.error("Task not found. Please try again.")
            continue

        return Selection(SelectionOutcome.SELECTED, task)


def ask_yes_no(prompter: Prompter, question: str) -> bool:
    """Ask until the answer is yes/no. Closed input counts as "no"."""
    while True:
        raw = prompter.ask(question)
        if raw is None:
            return False

        answer = raw.strip().lower()
        if not answer:
            prompter.error("Input cannot be empty.")
            continue
        if answer in YES_WORDS:
            return True
        if answer in NO_WORDS:
            return False

        prompter.error("Invalid input. Please type 'yes' or 'no'.")
