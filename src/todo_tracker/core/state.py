# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_manager import TaskManager


@dataclass
class AppState:
    """
    Process-lifetime state owned by the entry point and passed to the menus.

    settings is typed as Any so tests can pass a SimpleNamespace.
    """

    settings: Any
    tasks: TaskManager
