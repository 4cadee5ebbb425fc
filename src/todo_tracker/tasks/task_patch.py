# src/todo_tracker/tasks/task_patch.py

"""
Three-state patch values for partial task edits.

Each editable field of a TaskPatch is one of:
- UNSET       leave the field as it is
- CLEAR       empty the field (what "empty" means is decided per field)
- Set(value)  replace the field with value

The interactive layer speaks in raw strings ("" keeps, " " clears); use
TaskPatch.from_mapping to turn that convention into explicit patch values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Generic, Literal, TypeVar, Union

T = TypeVar("T")


class _Marker(Enum):
    UNSET = "unset"
    CLEAR = "clear"

    def __repr__(self) -> str:
        return self.name


UNSET: Final = _Marker.UNSET
CLEAR: Final = _Marker.CLEAR


@dataclass(frozen=True, slots=True)
class Set(Generic[T]):
    value: T


PatchValue = Union[Literal[_Marker.UNSET], Literal[_Marker.CLEAR], Set[T]]


def _text_value(mapping: Mapping[str, Any], name: str) -> PatchValue[str]:
    if name not in mapping:
        return UNSET
    raw = mapping[name]
    if raw is None or raw == "":
        return UNSET
    text = str(raw)
    if not text.strip():
        return CLEAR
    return Set(text)


def _token_value(mapping: Mapping[str, Any], name: str) -> PatchValue[Any]:
    raw = mapping.get(name)
    if raw is None or raw == "":
        return UNSET
    return Set(raw)


def _nullable_value(mapping: Mapping[str, Any], name: str) -> PatchValue[Any]:
    if name not in mapping:
        return UNSET
    raw = mapping[name]
    if raw is None:
        return CLEAR
    return Set(raw)


@dataclass(frozen=True, slots=True)
class TaskPatch:
    title: PatchValue[str] = UNSET
    description: PatchValue[str] = UNSET
    status: PatchValue[Any] = UNSET
    difficulty: PatchValue[Any] = UNSET
    due_date: PatchValue[Any] = UNSET
    cost: PatchValue[Any] = UNSET

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TaskPatch:
        """
        Build a patch from raw field values.

        - title/description: missing or "" keeps, whitespace-only clears
        - status/difficulty: missing or empty keeps, anything else is a token to normalize
        - due_date/cost: missing keeps, None clears, anything else replaces
        """
        return cls(
            title=_text_value(mapping, "title"),
            description=_text_value(mapping, "description"),
            status=_token_value(mapping, "status"),
            difficulty=_token_value(mapping, "difficulty"),
            due_date=_nullable_value(mapping, "due_date"),
            cost=_nullable_value(mapping, "cost"),
        )
