# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import StrEnum
from typing import Final, Literal

from .errors import InvalidTaskError


def _normalize(raw: str) -> str:
    return raw.strip().lower().replace("_", "-")


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidTaskError(f"priority must be a string, got {type(raw).__name__}")
        try:
            return cls(_normalize(raw))
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise InvalidTaskError(f"Unknown priority {raw!r} (expected one of: {allowed})") from None


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Every status may move to every other one; there is no terminal state.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidTaskError(f"status must be a string, got {type(raw).__name__}")
        try:
            return cls(_normalize(raw))
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise InvalidTaskError(f"Unknown status {raw!r} (expected one of: {allowed})") from None


ALL_PRIORITIES: Final = "all"

PrioritySelector = Priority | Literal["all"]


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    due_date: date | datetime
    priority: Priority
    status: TaskStatus
    estimated_time: int  # minutes

    description: str | None = None

    def with_status(self, status: TaskStatus) -> Task:
        return replace(self, status=status)


@dataclass(frozen=True, slots=True)
class NewTask:
    """Creation request: a Task without id and status (assigned by the store)."""

    title: str
    due_date: date | datetime
    priority: Priority | str
    estimated_time: int

    description: str | None = None
