# src/taskbook/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Tasks are kept in a plain list in insertion order, which is also the
    listing order. Ids come from a counter that starts at 1 and is never
    rewound, so deleted ids are not reissued.

    Ownership:
    - records are frozen; mark_done swaps in an updated copy
    - list() returns a tuple snapshot, never the internal list

    Every operation is total: a missing id is reported as None / False.

    Thread-safety:
    - none; wrap in LockedTaskStore for concurrent callers
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.debug("TaskStore ready")

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- public API ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def count_tasks(self) -> int:
        return len(self._tasks)

    def count_done(self) -> int:
        return sum(1 for t in self._tasks if t.done)

    def create(self, title: str) -> int:
        task_id = self._next_id
        self._next_id += 1
        self._tasks.append(Task(id=task_id, title=title, done=False))
        logger.debug("Task added id=%s title=%r", task_id, title)
        return task_id

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def mark_done(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("mark_done: no task id=%s", task_id)
            return False

        task = self._tasks[idx]
        if not task.done:
            self._tasks[idx] = replace(task, done=True)
            logger.debug("Task done id=%s", task_id)
        return True

    def delete(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete: no task id=%s", task_id)
            return None

        task = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s", task_id)
        return task
