# src/todo_console/tasks/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .errors import StorageError
from .task_codec import decode, encode
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFile:
    """
    Flat text file holding one encoded task per line.

    - load(): whole file -> tasks (missing file == no tasks)
    - append(): add one line (used by add)
    - rewrite(): replace the file with the given tasks (temp file + os.replace)

    Every OSError surfaces as StorageError.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("Task file %s does not exist yet; starting empty.", self._path)
            return []

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.exception("Failed to read task file %s", self._path)
            raise StorageError(self._path, "read") from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, raw_line in enumerate(raw.splitlines(), start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError:
                skipped += 1
                logger.debug("Skipping undecodable line %d in %s", lineno, self._path)
                continue
            if not line.strip():
                continue
            task = decode(line)
            if task is None:
                skipped += 1
                logger.debug("Skipping malformed line %d in %s", lineno, self._path)
                continue
            tasks.append(task)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def _needs_line_break(self) -> bool:
        """True if the file is non-empty and its last line is unterminated."""
        try:
            size = self._path.stat().st_size
        except FileNotFoundError:
            return False
        if size == 0:
            return False
        with self._path.open("rb") as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"

    def append(self, task: Task) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            prefix = "\n" if self._needs_line_break() else ""
            with self._path.open("a", encoding="utf-8", newline="\n") as f:
                f.write(prefix + encode(task) + "\n")
        except OSError as e:
            logger.exception("Failed to append task id=%s to %s", task.id, self._path)
            raise StorageError(self._path, "append to") from e

    def rewrite(self, tasks: Iterable[Task]) -> None:
        lines = [encode(t) + "\n" for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            logger.exception("Failed to rewrite %s", self._path)
            raise StorageError(self._path, "rewrite") from e
        logger.debug("Rewrote %s with %d tasks", self._path, len(lines))
