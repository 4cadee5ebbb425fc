# src/todo_tracker/cli/bootstrap.py

"""Builds the AppState the menus run against: store -> manager -> loaded collection."""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    for path in (settings.data_dir, settings.tasks_path.parent):
        path.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Wire a TaskManager over the JSON file named by settings.tasks_path and load it.

    Tests pass their own settings; the CLI passes none and gets the cached env-based ones.
    """
    settings = settings or get_settings()
    _ensure_local_dirs(settings)

    manager = TaskManager(TaskStore(settings.tasks_path))
    total = manager.load()
    logger.info("State ready: %d tasks from %s", total, settings.tasks_path)

    return AppState(settings=settings, tasks=manager)
