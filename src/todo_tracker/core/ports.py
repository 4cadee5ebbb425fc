# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task manager depends on this Protocol instead of the JSON store,
so tests can swap in an in-memory or failing store.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

TaskRecord = dict[str, Any]
# Flat JSON-friendly task: enums as short codes, dates as ISO strings.


class TaskRecordStore(Protocol):
    """Persistence collaborator: whole-collection load and save."""

    def load(self) -> list[TaskRecord]: ...

    def save(self, records: Iterable[Mapping[str, Any]]) -> bool: ...
