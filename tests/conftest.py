# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_manager import TaskManager
from todo_tracker.tasks.task_store import TaskStore

from .fakes import FakeTerminal


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """Settings stand-in for bootstrap and the menus; never reads TODO_* vars or .env."""
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo",
        user_name="Tester",
        log_level="WARNING",
        clear_screen=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def manager(store: TaskStore) -> TaskManager:
    return TaskManager(store)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired exactly like the real app, on a tmp tasks file."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    """setup_logging replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
