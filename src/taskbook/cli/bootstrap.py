# src/taskbook/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists when file logging is on,
- wires the concrete task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.locked_store import LockedTaskStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    if getattr(settings, "log_to_file", False):
        settings.data_dir.mkdir(parents=True, exist_ok=True)


def build_task_store(settings) -> TaskRepo:
    store: TaskRepo = TaskStore()
    if getattr(settings, "thread_safe", False):
        store = LockedTaskStore(store)
    logger.debug("Task store built: %s", type(store).__name__)
    return store


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(settings=settings, task_store=build_task_store(settings))
