# src/taskbook/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Two-valued view of the done flag.

    Notes:
    - the only transition is pending -> done (via TaskStore.mark_done)
    - done is terminal; the task can still be deleted
    """

    PENDING = "pending"
    DONE = "done"

    @classmethod
    def from_done(cls, done: bool) -> TaskStatus:
        return cls.DONE if done else cls.PENDING


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    done: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.from_done(self.done)
