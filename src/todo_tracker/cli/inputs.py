# src/todo_tracker/cli/inputs.py

"""Parsing of free-text answers typed into the add/edit forms."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from ..tasks.task_patch import TaskPatch

_DMY_RE = re.compile(r"^(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{4})$")


def parse_due_date(text: str | None) -> date | None:
    """
    Parse dd/mm/yyyy (also dd-mm-yyyy, dd.mm.yyyy) or ISO yyyy-mm-dd.
    Returns None for blank or invalid input.
    """
    if not text or not text.strip():
        return None
    raw = text.strip()

    m = _DMY_RE.match(raw)
    if m:
        day, month, year = (int(g) for g in m.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def parse_cost(text: str | None) -> float | None:
    """Parse a decimal cost ("12.5" or "12,5"). Returns None when not a finite number."""
    if not text or not text.strip():
        return None
    try:
        value = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def build_edit_patch(answers: Mapping[str, str]) -> tuple[TaskPatch, list[str]]:
    """
    Turn raw edit-form answers into a TaskPatch.

    Convention per answer: "" keeps the field, a lone space clears it.
    Returns the patch plus the names of fields skipped because they could not be parsed.
    """
    fields: dict[str, Any] = {}
    skipped: list[str] = []

    for name in ("title", "description", "status", "difficulty"):
        raw = answers.get(name, "")
        if raw != "":
            fields[name] = raw

    due_raw = answers.get("due_date", "")
    if due_raw != "":
        if not due_raw.strip():
            fields["due_date"] = None
        else:
            due = parse_due_date(due_raw)
            if due is None:
                skipped.append("due_date")
            else:
                fields["due_date"] = due

    cost_raw = answers.get("cost", "")
    if cost_raw != "":
        if not cost_raw.strip():
            fields["cost"] = None
        else:
            cost = parse_cost(cost_raw)
            if cost is None:
                skipped.append("cost")
            else:
                fields["cost"] = cost

    return TaskPatch.from_mapping(fields), skipped
