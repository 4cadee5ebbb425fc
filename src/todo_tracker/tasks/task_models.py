# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, StrEnum
from typing import Any, TypeVar

TITLE_MAX_LEN = 100
DESCRIPTION_MAX_LEN = 500

E = TypeVar("E", bound=Enum)


class TaskValidationError(ValueError):
    """Raised when a task cannot be constructed from the given values."""


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - the enum value is the short code, which is also what gets persisted
    - every member also carries a numeric menu key and a display label
    """

    key: int
    label: str

    PENDING = ("p", 1, "Pendiente")
    IN_PROGRESS = ("e", 2, "En curso")
    DONE = ("t", 3, "Terminada")
    CANCELLED = ("c", 4, "Cancelada")

    def __new__(cls, code: str, key: int, label: str) -> TaskStatus:
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.key = key
        obj.label = label
        return obj

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus | None:
        return normalize_enum(cls, raw)


class TaskDifficulty(StrEnum):
    """Task difficulty; same layout as TaskStatus plus a star rating."""

    key: int
    label: str
    stars: str

    EASY = ("f", 1, "fácil", "⭐☆☆")
    MEDIUM = ("m", 2, "medio", "⭐⭐☆")
    HARD = ("d", 3, "difícil", "⭐⭐⭐")

    def __new__(cls, code: str, key: int, label: str, stars: str) -> TaskDifficulty:
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.key = key
        obj.label = label
        obj.stars = stars
        return obj

    @classmethod
    def parse(cls, raw: Any) -> TaskDifficulty | None:
        return normalize_enum(cls, raw)


def _as_number(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def normalize_enum(enum_cls: type[E], raw: Any) -> E | None:
    """
    Resolve a raw user/persisted token to a member of enum_cls.

    Accepted forms (case-insensitive, trimmed): numeric key, short code, label.
    Members are tried in declaration order and the first match wins.
    Returns None when nothing matches; never raises.
    """
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw

    text = str(raw).strip().casefold()
    number = _as_number(text)

    for member in enum_cls:
        if number is not None and number == getattr(member, "key", None):
            return member
        if str(member.value).casefold() == text:
            return member
        if str(getattr(member, "label", "")).casefold() == text:
            return member
    return None


def _now() -> datetime:
    return datetime.now().astimezone()


def _new_id() -> str:
    return uuid.uuid4().hex


def clean_title(raw: str | None) -> str:
    """Trim a title and validate its length; raises TaskValidationError."""
    if raw is not None and not isinstance(raw, str):
        raise TaskValidationError(f"Title must be text, got {type(raw).__name__}.")
    title = (raw or "").strip()
    if not title:
        raise TaskValidationError("Title is required.")
    if len(title) > TITLE_MAX_LEN:
        raise TaskValidationError(f"Title must not exceed {TITLE_MAX_LEN} characters.")
    return title


def _coerce_due_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def _parse_timestamp(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        ts = raw
    else:
        ts = datetime.fromisoformat(str(raw))
    # Naive stamps are taken as local time.
    return ts if ts.tzinfo is not None else ts.astimezone()


def _parse_record_date(raw: Any) -> date | None:
    if raw is None or raw == "":
        return None
    text = str(raw)
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


def _record_enum_token(raw: Any) -> Any:
    # Older files stored the whole variant object, e.g. {"char": "p", ...}.
    if isinstance(raw, Mapping):
        return raw.get("char", raw.get("code"))
    return raw


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    status: TaskStatus
    difficulty: TaskDifficulty
    due_date: date | None
    cost: float | None
    created_at: datetime
    last_edited_at: datetime

    @classmethod
    def create(
        cls,
        title: str | None,
        description: str | None = "",
        status: Any = None,
        difficulty: Any = None,
        due_date: date | None = None,
        cost: float | None = None,
    ) -> Task:
        """
        Build a new task with a fresh id and timestamps.

        Unknown status/difficulty tokens fall back to PENDING/EASY.
        A title that is blank or too long raises TaskValidationError.
        """
        now = _now()
        return cls(
            id=_new_id(),
            title=clean_title(title),
            description=(description or "")[:DESCRIPTION_MAX_LEN],
            status=normalize_enum(TaskStatus, status) or TaskStatus.PENDING,
            difficulty=normalize_enum(TaskDifficulty, difficulty) or TaskDifficulty.EASY,
            due_date=_coerce_due_date(due_date),
            cost=cost,
            created_at=now,
            last_edited_at=now,
        )

    def touch(self) -> None:
        """Advance last_edited_at to now (never backwards)."""
        self.last_edited_at = max(_now(), self.last_edited_at)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "difficulty": self.difficulty.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "cost": self.cost,
            "created_at": self.created_at.isoformat(),
            "last_edited_at": self.last_edited_at.isoformat(),
        }

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Task:
        """
        Rebuild a task from its persisted form.

        id and both timestamps are kept verbatim. Raises ValueError/KeyError/TypeError
        when the record is unusable; callers decide whether to skip it.
        """
        task_id = raw["id"]
        if not task_id:
            raise ValueError("record has no id")

        created_at = _parse_timestamp(raw["created_at"])
        edited_raw = raw.get("last_edited_at")
        last_edited_at = _parse_timestamp(edited_raw) if edited_raw else created_at

        return cls(
            id=str(task_id),
            title=clean_title(raw.get("title")),
            description=str(raw.get("description") or "")[:DESCRIPTION_MAX_LEN],
            status=normalize_enum(TaskStatus, _record_enum_token(raw.get("status")))
            or TaskStatus.PENDING,
            difficulty=normalize_enum(TaskDifficulty, _record_enum_token(raw.get("difficulty")))
            or TaskDifficulty.EASY,
            due_date=_parse_record_date(raw.get("due_date")),
            cost=raw.get("cost"),
            created_at=created_at,
            last_edited_at=max(last_edited_at, created_at),
        )
