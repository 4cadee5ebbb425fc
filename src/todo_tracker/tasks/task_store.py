# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The file holds a single JSON list of flat task records.

    Failure policy:
    - load(): a missing file is an empty collection; an unreadable or corrupt file
      is logged and also treated as empty (never raises)
    - save(): written to a temp file and moved into place; errors are logged and
      reported through the return value (never raises)
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            logger.info("No tasks file at %s; starting empty.", self._path)
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.exception("Failed to read tasks file %s; starting empty.", self._path)
            return []

        if not isinstance(data, list):
            logger.error(
                "Tasks file %s does not hold a list (got %s); starting empty.",
                self._path,
                type(data).__name__,
            )
            return []

        records = [item for item in data if isinstance(item, dict)]
        dropped = len(data) - len(records)
        if dropped:
            logger.warning("Ignored %d non-object entries in %s", dropped, self._path)

        logger.debug("Loaded %d task records from %s", len(records), self._path)
        return records

    def save(self, records: Iterable[Mapping[str, Any]]) -> bool:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            payload = json.dumps([dict(r) for r in records], ensure_ascii=False, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save tasks to %s", self._path)
            return False

        logger.debug("Saved tasks to %s", self._path)
        return True
