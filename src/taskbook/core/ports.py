# src/taskbook/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the host program.

Commands and connectors depend on this Protocol instead of a concrete store,
so the plain TaskStore and the LockedTaskStore are interchangeable.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Core operations (all total: missing ids give None / False)
    def create(self, title: str) -> int: ...
    def get(self, task_id: int) -> Task | None: ...
    def list(self) -> tuple[Task, ...]: ...
    def mark_done(self, task_id: int) -> bool: ...
    def delete(self, task_id: int) -> Task | None: ...

    # Diagnostics (/status)
    @property
    def next_id(self) -> int: ...
    def count_tasks(self) -> int: ...
    def count_done(self) -> int: ...
