# src/todoz/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .errors import InvalidArgument, IOFailure, NotFound, ParseFailure
from .task_models import Progress, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    Owns the in-memory task list and the file it is persisted to. Every mutation
    updates the list first and then rewrites the whole file; there is no
    incremental format.

    If a save fails the in-memory change is kept (no rollback) and IOFailure is
    raised, so the file may lag behind until the next successful save.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self.tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Replace the in-memory list with the file contents.

        A missing file is an empty list. Unreadable -> IOFailure, malformed ->
        ParseFailure; in both error cases the in-memory list is left untouched.
        """
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s; starting empty.", self._path)
            self.tasks = []
            return self.tasks
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"Failed to read {self._path.name}", e) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseFailure(f"Failed to parse {self._path.name}: {e}") from e

        if not isinstance(data, list):
            raise ParseFailure(f"Failed to parse {self._path.name}: expected a JSON array")

        loaded: list[Task] = []
        seen: set[int] = set()
        for i, item in enumerate(data):
            task = Task.from_dict(item, index=i)
            if task.id in seen:
                raise ParseFailure(f"Failed to parse {self._path.name}: duplicate id {task.id}")
            seen.add(task.id)
            loaded.append(task)

        self.tasks = loaded
        logger.info("Loaded %d tasks from %s", len(loaded), self._path)
        return self.tasks

    def save(self) -> None:
        """Write the full list as pretty JSON, creating the directory if needed."""
        payload = json.dumps([t.to_dict() for t in self.tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.warning("Saving %d tasks to %s failed: %s", len(self.tasks), self._path, e)
            raise IOFailure(f"Failed to write to {self._path.name}", e) from e
        logger.debug("Saved %d tasks to %s", len(self.tasks), self._path)

    # ---- queries ----

    def next_id(self) -> int:
        return max((t.id for t in self.tasks), default=0) + 1

    def get(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFound(task_id)

    def progress(self) -> Progress:
        return Progress.of(self.tasks)

    # ---- mutations ----

    def add(self, description: str) -> Task:
        if not description or not description.strip():
            raise InvalidArgument("Please describe your task")

        task = Task(id=self.next_id(), description=description)
        self.tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        self.save()
        return task

    def toggle(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        self.save()
        return task

    def remove(self, task_id: int) -> Task:
        task = self.get(task_id)
        self.tasks.remove(task)
        logger.debug("Task removed id=%s", task.id)
        self.save()
        return task

    def clear(self) -> None:
        n = len(self.tasks)
        self.tasks.clear()
        logger.debug("Cleared %d tasks", n)
        self.save()
