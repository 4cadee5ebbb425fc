# src/todo_tracker/tasks/task_manager.py

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Callable, Mapping, Sequence
from datetime import date
from enum import StrEnum
from typing import Any

from ..core.ports import TaskRecordStore
from .task_models import (
    DESCRIPTION_MAX_LEN,
    TITLE_MAX_LEN,
    Task,
    TaskDifficulty,
    TaskStatus,
    normalize_enum,
)
from .task_patch import CLEAR, Set, TaskPatch

logger = logging.getLogger(__name__)


class SortCriterion(StrEnum):
    TITLE = "title"
    DUE_DATE = "due_date"
    CREATED_AT = "created_at"

    @classmethod
    def parse(cls, raw: Any) -> SortCriterion | None:
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return None
        return _SORT_ALIASES.get(str(raw).strip().casefold())


_SORT_ALIASES: dict[str, SortCriterion] = {
    "title": SortCriterion.TITLE,
    "titulo": SortCriterion.TITLE,
    "t": SortCriterion.TITLE,
    "due_date": SortCriterion.DUE_DATE,
    "duedate": SortCriterion.DUE_DATE,
    "vencimiento": SortCriterion.DUE_DATE,
    "v": SortCriterion.DUE_DATE,
    "created_at": SortCriterion.CREATED_AT,
    "createdat": SortCriterion.CREATED_AT,
    "creacion": SortCriterion.CREATED_AT,
    "c": SortCriterion.CREATED_AT,
}


def collation_key(text: str) -> tuple[str, str]:
    """
    Locale-style sort key: accents and case are ignored first,
    the raw text only breaks ties.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def _due_key(task: Task) -> tuple[int, date]:
    # Undated tasks go last.
    if task.due_date is None:
        return 1, date.max
    return 0, task.due_date


_SORT_KEYS: dict[SortCriterion, Callable[[Task], Any]] = {
    SortCriterion.TITLE: lambda t: collation_key(t.title),
    SortCriterion.DUE_DATE: _due_key,
    SortCriterion.CREATED_AT: lambda t: t.created_at,
}


class TaskManager:
    """
    In-memory task collection backed by a TaskRecordStore.

    Every mutation (add/edit) is followed by a full save. A failed save is
    logged by the store and reported as False; the in-memory change stays.
    """

    def __init__(self, store: TaskRecordStore) -> None:
        self._store = store
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    # ---- persistence ----

    def load(self) -> int:
        """Replace the collection with the store contents. Returns the task count."""
        loaded: list[Task] = []
        for raw in self._store.load():
            try:
                loaded.append(Task.from_record(raw))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping unreadable task record id=%s", raw.get("id"), exc_info=True)
        self._tasks = loaded
        logger.info("Loaded %d tasks", len(loaded))
        return len(loaded)

    def save(self) -> bool:
        ok = self._store.save(t.to_record() for t in self._tasks)
        if not ok:
            logger.warning("Tasks were not persisted; changes live in memory only.")
        return ok

    # ---- mutations ----

    def add(self, task: Task) -> bool:
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return self.save()

    def edit(self, task: Task, patch: TaskPatch | Mapping[str, Any]) -> bool:
        """
        Apply a partial edit to task, bump last_edited_at and persist.

        Rules per field:
        - title: Set replaces (trimmed, max 100); a blank value or CLEAR keeps it
        - description: Set replaces (max 500); CLEAR empties it
        - status/difficulty: Set is normalized; unknown tokens keep the old value
        - due_date/cost: Set replaces; CLEAR sets None
        """
        if not isinstance(patch, TaskPatch):
            patch = TaskPatch.from_mapping(patch)

        if isinstance(patch.title, Set):
            new_title = str(patch.title.value).strip()
            if new_title:
                task.title = new_title[:TITLE_MAX_LEN]

        if patch.description is CLEAR:
            task.description = ""
        elif isinstance(patch.description, Set) and patch.description.value != "":
            task.description = str(patch.description.value)[:DESCRIPTION_MAX_LEN]

        if isinstance(patch.status, Set):
            status = normalize_enum(TaskStatus, patch.status.value)
            if status is not None:
                task.status = status
            else:
                logger.debug("Ignoring unknown status %r for task id=%s", patch.status.value, task.id)

        if isinstance(patch.difficulty, Set):
            difficulty = normalize_enum(TaskDifficulty, patch.difficulty.value)
            if difficulty is not None:
                task.difficulty = difficulty
            else:
                logger.debug(
                    "Ignoring unknown difficulty %r for task id=%s", patch.difficulty.value, task.id
                )

        if patch.due_date is CLEAR:
            task.due_date = None
        elif isinstance(patch.due_date, Set):
            task.due_date = patch.due_date.value

        if patch.cost is CLEAR:
            task.cost = None
        elif isinstance(patch.cost, Set):
            task.cost = patch.cost.value

        task.touch()
        logger.debug("Task edited id=%s", task.id)
        return self.save()

    # ---- queries ----

    @staticmethod
    def locate_by_position(index: Any, displayed: Sequence[Task]) -> Task | None:
        """1-based lookup into the list the user is looking at (not the master list)."""
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 < index <= len(displayed):
            return displayed[index - 1]
        return None

    def filter_by_status(self, status_key: Any = None) -> list[Task]:
        if not status_key:
            return list(self._tasks)
        status = normalize_enum(TaskStatus, status_key)
        if status is None:
            return []
        return [t for t in self._tasks if t.status is status]

    def search_by_title(self, query: str | None) -> list[Task]:
        if not query or not query.strip():
            return []
        needle = query.strip().casefold()
        return [t for t in self._tasks if needle in t.title.casefold()]

    @staticmethod
    def sort_by(tasks: Sequence[Task], criterion: Any) -> list[Task]:
        """Return a sorted copy; an unknown criterion keeps the original order."""
        parsed = SortCriterion.parse(criterion)
        if parsed is None:
            return list(tasks)
        return sorted(tasks, key=_SORT_KEYS[parsed])
