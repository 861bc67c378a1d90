# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date

from taskboard.tasks.task_models import NewTask, Priority, Task, TaskStatus


def make_task(
    task_id: str,
    title: str,
    *,
    priority: Priority = Priority.MEDIUM,
    status: TaskStatus = TaskStatus.PENDING,
    description: str | None = None,
    estimated_time: int = 30,
) -> Task:
    return Task(
        id=task_id,
        title=title,
        description=description,
        due_date=date(2026, 10, 20),
        priority=priority,
        status=status,
        estimated_time=estimated_time,
    )


def make_new_task(title: str = "Plan sprint", **overrides) -> NewTask:
    fields = {
        "title": title,
        "description": None,
        "due_date": date(2026, 10, 20),
        "priority": Priority.MEDIUM,
        "estimated_time": 45,
    }
    fields.update(overrides)
    return NewTask(**fields)


@dataclass(slots=True)
class RecordingObserver:
    """
    Status observer used by store tests.

    Captures every (task_id, new_status) notification for assertions.
    """

    calls: list[tuple[str, TaskStatus]] = field(default_factory=list)

    def __call__(self, task_id: str, new_status: TaskStatus) -> None:
        self.calls.append((task_id, new_status))


class SequenceIds:
    """Deterministic id factory: yields the given ids in order."""

    def __init__(self, ids: list[str]) -> None:
        self._ids: Iterator[str] = iter(ids)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return next(self._ids)
