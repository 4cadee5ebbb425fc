# src/todo_tracker/cli/render.py

from __future__ import annotations

from datetime import date, datetime

from ..tasks.task_models import Task

NO_DATA = "No data"


def _fmt_date(value: date | None) -> str:
    return value.strftime("%d/%m/%Y") if value else NO_DATA


def _fmt_timestamp(value: datetime | None) -> str:
    return value.strftime("%d/%m/%Y %H:%M:%S") if value else NO_DATA


def _fmt_cost(value: float | None) -> str:
    if value is None:
        return NO_DATA
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_task_line(position: int, task: Task) -> str:
    return f"[{position}] {task.title} (Status: {task.status.label})"


def format_task_details(task: Task) -> str:
    lines = [
        f"Task: {task.title}",
        f"Description: {task.description or NO_DATA}",
        f"Status: {task.status.label}",
        f"Difficulty: {task.difficulty.stars} ({task.difficulty.label})",
        f"Cost: {_fmt_cost(task.cost)}",
        f"Due: {_fmt_date(task.due_date)}",
        f"Created: {_fmt_timestamp(task.created_at)}",
        f"Last edited: {_fmt_timestamp(task.last_edited_at)}",
    ]
    return "\n".join(lines)
