# src/taskboard/tasks/task_api.py

from __future__ import annotations

import logging
from datetime import date, datetime

from ..core.state import AppState
from .errors import InvalidTaskError, TaskNotFoundError
from .task_filter import filter_tasks
from .task_models import NewTask, Priority, Task, TaskStatus

logger = logging.getLogger(__name__)

# Quick actions offered per task, in display order.
# They only decide what the console proposes; TaskStore accepts any transition.
QUICK_ACTIONS: dict[str, TaskStatus] = {
    "complete": TaskStatus.COMPLETED,
    "start": TaskStatus.IN_PROGRESS,
    "cancel": TaskStatus.CANCELLED,
}

DUE_DATE_FORMAT = "%a %b %d %Y"


def available_actions(task: Task) -> list[str]:
    actions: list[str] = []
    if task.status != TaskStatus.COMPLETED:
        actions.append("complete")
    if task.status == TaskStatus.PENDING:
        actions.append("start")
    if task.status in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS):
        actions.append("cancel")
    return actions


def parse_due_date(raw: str) -> date | datetime:
    """ISO date ("2026-10-20") or date-time ("2026-10-20T09:30")."""
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise InvalidTaskError(f"Invalid due date {raw!r} (expected ISO format, e.g. 2026-10-20)") from None


def parse_estimated_time(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidTaskError(f"Invalid estimated time {raw!r} (expected whole minutes)") from None


def new_task_from_text(text: str, *, today: date | None = None) -> NewTask:
    """
    Parse "<title>; priority=high; due=2026-10-20; est=30; desc=..." into a NewTask.

    Defaults: priority medium, due today, estimate 0, no description.
    """
    parts = [p.strip() for p in text.split(";")]
    title = parts[0] if parts else ""

    priority: Priority | str = Priority.MEDIUM
    due: date | datetime = today or date.today()
    est = 0
    description: str | None = None

    for part in parts[1:]:
        if not part:
            continue
        key, sep, value = part.partition("=")
        if not sep:
            raise InvalidTaskError(f"Expected key=value, got {part!r}")
        key = key.strip().lower()
        value = value.strip()
        if key in ("priority", "p"):
            priority = Priority.parse(value)
        elif key in ("due", "date"):
            due = parse_due_date(value)
        elif key in ("est", "estimate", "minutes"):
            est = parse_estimated_time(value)
        elif key in ("desc", "description"):
            description = value or None
        else:
            raise InvalidTaskError(f"Unknown field {key!r} (use priority, due, est, desc)")

    return NewTask(
        title=title,
        description=description,
        due_date=due,
        priority=priority,
        estimated_time=est,
    )


def add_task(state: AppState, text: str, *, today: date | None = None) -> str:
    """Convenience helper: parse `text` and create the task in state.task_store."""
    new_task = new_task_from_text(text, today=today)
    return state.task_store.create(new_task)


def visible_tasks(state: AppState) -> list[Task]:
    """Tasks matching the active priority selector and search text."""
    return filter_tasks(state.task_store.list_tasks(), state.priority, state.search_text)


def resolve_task_id(state: AppState, ref: str) -> str:
    """Accept a full id or a unique id prefix."""
    ref = ref.strip()
    if not ref:
        raise InvalidTaskError("Task id is required")
    if state.task_store.get_task(ref) is not None:
        return ref

    matches = [t.id for t in state.task_store.list_tasks() if t.id.startswith(ref)]
    if not matches:
        raise TaskNotFoundError(ref)
    if len(matches) > 1:
        raise InvalidTaskError(f"Ambiguous id prefix {ref!r} ({len(matches)} tasks match)")
    return matches[0]


def change_status(state: AppState, ref: str, status: TaskStatus | str) -> Task:
    """Resolve `ref`, update its status and return the updated task."""
    task_id = resolve_task_id(state, ref)
    if not state.task_store.set_status(task_id, status):
        # Only reachable if the task vanished between resolve and update.
        raise TaskNotFoundError(task_id)
    task = state.task_store.get_task(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def short_id(task: Task, width: int = 8) -> str:
    return task.id[:width]


def format_due(task: Task) -> str:
    return task.due_date.strftime(DUE_DATE_FORMAT)


def format_task(task: Task) -> str:
    """One-line rendering: id, status, priority, title, description, due date, estimate."""
    line = f"[{short_id(task)}] ({task.status.value}) [{task.priority.value}] {task.title}"
    if task.description:
        line += f" - {task.description}"
    return f"{line} | due: {format_due(task)} | est: {task.estimated_time} min"
