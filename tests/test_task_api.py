# tests/test_task_api.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.errors import InvalidTaskError, TaskNotFoundError
from taskboard.tasks.task_api import (
    add_task,
    available_actions,
    change_status,
    format_task,
    new_task_from_text,
    parse_due_date,
    resolve_task_id,
    visible_tasks,
)
from taskboard.tasks.task_models import Priority, TaskStatus
from taskboard.tasks.task_store import TaskStore

from .fakes import make_task


def test_new_task_from_text_parses_all_fields() -> None:
    new_task = new_task_from_text(
        "Write report; priority=high; due=2026-10-20; est=90; desc=Quarterly numbers"
    )

    assert new_task.title == "Write report"
    assert new_task.priority is Priority.HIGH
    assert new_task.due_date == date(2026, 10, 20)
    assert new_task.estimated_time == 90
    assert new_task.description == "Quarterly numbers"


def test_new_task_from_text_defaults() -> None:
    new_task = new_task_from_text("Clean desk", today=date(2026, 10, 17))

    assert new_task.priority is Priority.MEDIUM
    assert new_task.due_date == date(2026, 10, 17)
    assert new_task.estimated_time == 0
    assert new_task.description is None


@pytest.mark.parametrize(
    "text",
    [
        "Title; priority=urgent",
        "Title; due=next tuesday",
        "Title; est=ten",
        "Title; colour=red",
        "Title; priority",
    ],
)
def test_new_task_from_text_rejects_bad_fields(text: str) -> None:
    with pytest.raises(InvalidTaskError):
        new_task_from_text(text)


def test_parse_due_date_accepts_dates_and_datetimes() -> None:
    assert parse_due_date("2026-10-20") == date(2026, 10, 20)
    assert parse_due_date("2026-10-20T09:30") == datetime(2026, 10, 20, 9, 30)


def test_add_task_validates_through_the_store(state: AppState) -> None:
    with pytest.raises(InvalidTaskError):
        add_task(state, "   ; priority=high")
    assert state.task_store.count_tasks() == 2

    task_id = add_task(state, "Pay rent; priority=high; est=5")
    assert state.task_store.list_tasks()[-1].id == task_id


def test_visible_tasks_follow_state_selectors(state: AppState) -> None:
    assert [t.id for t in visible_tasks(state)] == ["a", "b"]

    state.priority = Priority.LOW
    assert [t.id for t in visible_tasks(state)] == ["b"]

    state.priority = "all"
    state.search_text = "report"
    assert [t.id for t in visible_tasks(state)] == ["a"]


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (TaskStatus.PENDING, ["complete", "start", "cancel"]),
        (TaskStatus.IN_PROGRESS, ["complete", "cancel"]),
        (TaskStatus.COMPLETED, []),
        (TaskStatus.CANCELLED, ["complete"]),
    ],
)
def test_available_actions_per_status(status: TaskStatus, expected: list[str]) -> None:
    assert available_actions(make_task("t", "Any", status=status)) == expected


def test_resolve_task_id_by_prefix(state: AppState) -> None:
    state.task_store.create(
        new_task_from_text("Prefix me", today=date(2026, 10, 17))
    )
    new_id = state.task_store.list_tasks()[-1].id

    assert resolve_task_id(state, "a") == "a"
    assert resolve_task_id(state, new_id[:10]) == new_id

    with pytest.raises(TaskNotFoundError):
        resolve_task_id(state, "zzz")
    with pytest.raises(InvalidTaskError):
        resolve_task_id(state, "")


def test_resolve_task_id_rejects_ambiguous_prefix(settings) -> None:
    state = AppState(
        settings=settings,
        task_store=TaskStore([make_task("abc1", "One"), make_task("abc2", "Two")]),
    )
    with pytest.raises(InvalidTaskError):
        resolve_task_id(state, "abc")


def test_change_status_allows_reopening(state: AppState, observer) -> None:
    change_status(state, "a", TaskStatus.CANCELLED)
    task = change_status(state, "a", TaskStatus.PENDING)

    assert task.status is TaskStatus.PENDING
    assert observer.calls == [("a", TaskStatus.CANCELLED), ("a", TaskStatus.PENDING)]


def test_format_task_renders_one_line() -> None:
    task = make_task(
        "abcdef123456", "Write report", priority=Priority.HIGH, description="Q3", estimated_time=90
    )

    assert format_task(task) == (
        "[abcdef12] (pending) [high] Write report - Q3 | due: Tue Oct 20 2026 | est: 90 min"
    )
