# src/taskbook/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: object

    # The one store owned by the host program for its lifetime.
    task_store: TaskRepo
