# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from todo_tracker.tasks.task_models import (
    Task,
    TaskDifficulty,
    TaskStatus,
    TaskValidationError,
    clean_title,
    normalize_enum,
)


@pytest.mark.parametrize("length", [1, 2, 50, 99, 100])
def test_create_accepts_titles_up_to_100_chars(length: int) -> None:
    title = "x" * length
    task = Task.create(f"  {title}  ")
    assert task.title == title


@pytest.mark.parametrize("title", [None, "", "   ", "x" * 101])
def test_create_rejects_blank_or_long_titles(title) -> None:
    with pytest.raises(TaskValidationError):
        Task.create(title)


def test_create_defaults() -> None:
    task = Task.create("Buy milk")
    assert task.description == ""
    assert task.status is TaskStatus.PENDING
    assert task.difficulty is TaskDifficulty.EASY
    assert task.due_date is None
    assert task.cost is None
    assert task.created_at == task.last_edited_at
    assert task.created_at.tzinfo is not None
    assert len(task.id) == 32


def test_create_assigns_distinct_ids() -> None:
    assert Task.create("a").id != Task.create("a").id


def test_create_truncates_description() -> None:
    task = Task.create("t", "d" * 600)
    assert task.description == "d" * 500


def test_create_unknown_enum_tokens_fall_back_to_defaults() -> None:
    task = Task.create("t", "", "nope", "zzz")
    assert task.status is TaskStatus.PENDING
    assert task.difficulty is TaskDifficulty.EASY


def test_create_normalizes_enum_tokens() -> None:
    task = Task.create("t", "", "En Curso", 3)
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.difficulty is TaskDifficulty.HARD


def test_create_due_date_and_cost() -> None:
    task = Task.create("t", due_date=datetime(2025, 5, 1, 12, 30), cost=12.5)
    assert task.due_date == date(2025, 5, 1)
    assert task.cost == 12.5

    assert Task.create("t", due_date="01/05/2025").due_date is None  # type: ignore[arg-type]


@pytest.mark.parametrize("raw", ["p", 1, "1", "Pendiente", "  pendiente ", "PENDIENTE", "P", 1.0])
def test_normalize_status_pending_forms(raw) -> None:
    assert normalize_enum(TaskStatus, raw) is TaskStatus.PENDING


def test_normalize_status_forms_agree() -> None:
    assert (
        normalize_enum(TaskStatus, "p")
        == normalize_enum(TaskStatus, 1)
        == normalize_enum(TaskStatus, "Pendiente")
    )


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("e", TaskStatus.IN_PROGRESS),
        ("2", TaskStatus.IN_PROGRESS),
        ("en curso", TaskStatus.IN_PROGRESS),
        ("t", TaskStatus.DONE),
        ("Terminada", TaskStatus.DONE),
        (4, TaskStatus.CANCELLED),
        ("c", TaskStatus.CANCELLED),
    ],
)
def test_normalize_status_variants(raw, expected) -> None:
    assert TaskStatus.parse(raw) is expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("f", TaskDifficulty.EASY),
        ("1", TaskDifficulty.EASY),
        ("Fácil", TaskDifficulty.EASY),
        ("m", TaskDifficulty.MEDIUM),
        (2, TaskDifficulty.MEDIUM),
        ("d", TaskDifficulty.HARD),
        ("DIFÍCIL", TaskDifficulty.HARD),
    ],
)
def test_normalize_difficulty_variants(raw, expected) -> None:
    assert TaskDifficulty.parse(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "zzz", 0, 5, "x1", "done"])
def test_normalize_miss_returns_none(raw) -> None:
    assert normalize_enum(TaskStatus, raw) is None


def test_normalize_returns_member_unchanged() -> None:
    assert normalize_enum(TaskStatus, TaskStatus.DONE) is TaskStatus.DONE


def test_enum_members_carry_key_code_label() -> None:
    assert [s.key for s in TaskStatus] == [1, 2, 3, 4]
    assert [s.value for s in TaskStatus] == ["p", "e", "t", "c"]
    assert TaskStatus.DONE.label == "Terminada"
    assert TaskDifficulty.HARD.stars == "⭐⭐⭐"
    assert TaskDifficulty.MEDIUM.label == "medio"


def test_touch_never_moves_backwards() -> None:
    task = Task.create("t")
    future = datetime(2999, 1, 1, tzinfo=timezone.utc)
    task.last_edited_at = future
    task.touch()
    assert task.last_edited_at == future


def test_record_round_trip_preserves_every_field() -> None:
    task = Task.create("Write report", "Q3 numbers", "e", "d", date(2025, 3, 1), 99.5)
    again = Task.from_record(task.to_record())
    assert again == task


def test_to_record_uses_short_codes_and_iso_dates() -> None:
    task = Task.create("t", status="t", difficulty="m", due_date=date(2025, 1, 31))
    rec = task.to_record()
    assert rec["status"] == "t"
    assert rec["difficulty"] == "m"
    assert rec["due_date"] == "2025-01-31"
    assert datetime.fromisoformat(rec["created_at"]) == task.created_at


def test_from_record_keeps_id_and_timestamps_verbatim() -> None:
    rec = {
        "id": "abc123",
        "title": "Old task",
        "description": "",
        "status": "c",
        "difficulty": "f",
        "due_date": None,
        "cost": None,
        "created_at": "2024-01-02T03:04:05+00:00",
        "last_edited_at": "2024-02-02T03:04:05+00:00",
    }
    task = Task.from_record(rec)
    assert task.id == "abc123"
    assert task.status is TaskStatus.CANCELLED
    assert task.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert task.last_edited_at == datetime(2024, 2, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_from_record_accepts_datetime_due_date_and_nested_enums() -> None:
    rec = {
        "id": "x1",
        "title": "Legacy",
        "status": {"clave": 3, "char": "t", "texto": "Terminada"},
        "difficulty": {"clave": 2, "char": "m"},
        "due_date": "2025-03-01T00:00:00.000Z",
        "created_at": "2025-01-01T10:00:00.000Z",
    }
    task = Task.from_record(rec)
    assert task.status is TaskStatus.DONE
    assert task.difficulty is TaskDifficulty.MEDIUM
    assert task.due_date == date(2025, 3, 1)
    assert task.last_edited_at == task.created_at


@pytest.mark.parametrize(
    "rec",
    [
        {"title": "no id", "created_at": "2025-01-01T00:00:00"},
        {"id": "", "title": "empty id", "created_at": "2025-01-01T00:00:00"},
        {"id": "x", "title": "", "created_at": "2025-01-01T00:00:00"},
        {"id": "x", "title": "no created"},
        {"id": "x", "title": "bad stamp", "created_at": "yesterday"},
    ],
)
def test_from_record_rejects_unusable_records(rec) -> None:
    with pytest.raises((KeyError, ValueError)):
        Task.from_record(rec)


@pytest.mark.parametrize("title", [123, True, 1.5, ["a"]])
def test_non_text_titles_are_validation_errors(title) -> None:
    with pytest.raises(TaskValidationError):
        clean_title(title)
    with pytest.raises(TaskValidationError):
        Task.from_record({"id": "x", "title": title, "created_at": "2025-01-01T00:00:00"})
