# src/taskbook/tasks/locked_store.py

from __future__ import annotations

import logging
import threading

from ..core.ports import TaskRepo
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class LockedTaskStore:
    """
    TaskRepo wrapper that serializes every call behind one lock.

    Reads take the lock too, so a reader never observes a half-applied
    mutation. Return values are those of the wrapped store.
    """

    def __init__(self, inner: TaskRepo | None = None) -> None:
        self._inner: TaskRepo = inner if inner is not None else TaskStore()
        self._lock = threading.RLock()
        logger.debug("LockedTaskStore ready inner=%s", type(self._inner).__name__)

    def __len__(self) -> int:
        return self.count_tasks()

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._inner.next_id

    def count_tasks(self) -> int:
        with self._lock:
            return self._inner.count_tasks()

    def count_done(self) -> int:
        with self._lock:
            return self._inner.count_done()

    def create(self, title: str) -> int:
        with self._lock:
            return self._inner.create(title)

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            return self._inner.get(task_id)

    def list(self) -> tuple[Task, ...]:
        with self._lock:
            return self._inner.list()

    def mark_done(self, task_id: int) -> bool:
        with self._lock:
            return self._inner.mark_done(task_id)

    def delete(self, task_id: int) -> Task | None:
        with self._lock:
            return self._inner.delete(task_id)
