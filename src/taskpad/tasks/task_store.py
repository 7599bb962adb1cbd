# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from .task_models import Task, example_tasks

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Owns the canonical task list and the id sequence:
    - ids start at next_id and only ever grow (never reused, even after remove)
    - every record handed out is a copy; callers cannot reach the stored objects
    - unknown ids on remove/update/toggle_complete are no-ops (reported as False)

    Thread-safety:
    - none; callers that share a store between threads must serialize access
    """

    def __init__(self, tasks: Iterable[Task] | None = None, *, next_id: int | None = None) -> None:
        self._tasks: list[Task] = []
        seen: set[int] = set()
        for t in tasks or ():
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id}")
            seen.add(t.id)
            self._tasks.append(replace(t))

        highest = max(seen, default=0)
        if next_id is None:
            next_id = highest + 1
        elif next_id <= highest:
            raise ValueError(f"next_id must be greater than {highest}, got {next_id}")
        self._next_id = int(next_id)

        logger.info("TaskStore ready total=%s next_id=%s", len(self._tasks), self._next_id)

    @classmethod
    def with_examples(cls, *, next_id: int | None = None) -> TaskStore:
        return cls(example_tasks(), next_id=next_id)

    # ---- low-level helpers ----

    def _find(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- public API ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def count(self) -> int:
        return len(self._tasks)

    def list_all(self) -> list[Task]:
        """Snapshot of all tasks in insertion order (new list, copied records)."""
        return [replace(t) for t in self._tasks]

    def get(self, task_id: int) -> Task | None:
        t = self._find(task_id)
        return replace(t) if t is not None else None

    def add(self, task: Task) -> Task:
        """
        Store a copy of `task` under the next id and return a copy of the stored record.

        The caller's object is left untouched; its id is ignored.
        """
        stored = replace(task, id=self._next_id)
        self._next_id += 1
        self._tasks.append(stored)
        logger.debug("Task added id=%s name=%r", stored.id, stored.name)
        return replace(stored)

    def remove(self, task_id: int) -> bool:
        t = self._find(task_id)
        if t is None:
            logger.debug("remove: no task id=%s", task_id)
            return False
        self._tasks.remove(t)
        logger.debug("Task removed id=%s", task_id)
        return True

    def update(self, task: Task) -> bool:
        """
        Overwrite name, details and is_completed of the stored task with the same id.

        id, created_date and due_date are left as stored.
        """
        t = self._find(task.id)
        if t is None:
            logger.debug("update: no task id=%s", task.id)
            return False
        t.name = task.name
        t.details = task.details
        t.is_completed = task.is_completed
        logger.debug("Task updated id=%s completed=%s", t.id, t.is_completed)
        return True

    def toggle_complete(self, task_id: int) -> bool:
        t = self._find(task_id)
        if t is None:
            logger.debug("toggle_complete: no task id=%s", task_id)
            return False
        t.is_completed = not t.is_completed
        logger.debug("Task toggled id=%s completed=%s", task_id, t.is_completed)
        return True
