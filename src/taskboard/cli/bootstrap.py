# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- reads the optional seed file into initial tasks,
- wires TaskStore (with its status observer) into AppState.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..config import get_settings
from ..core.ports import StatusObserver
from ..core.state import AppState
from ..tasks.errors import InvalidTaskError
from ..tasks.task_api import parse_due_date
from ..tasks.task_models import Priority, Task, TaskStatus
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def log_status_change(task_id: str, new_status: TaskStatus) -> None:
    logger.info("Task %s moved to %s", task_id, new_status.value)


def _task_from_seed(item: Any) -> Task:
    if not isinstance(item, dict):
        raise InvalidTaskError(f"Seed entry must be an object, got {type(item).__name__}")

    task_id = item.get("id")
    if not isinstance(task_id, str) or not task_id:
        raise InvalidTaskError("Seed entry is missing a string id")

    title = item.get("title")
    if not isinstance(title, str) or not title.strip():
        raise InvalidTaskError(f"Seed entry {task_id!r} has no title")

    est = item.get("estimated_time", 0)
    if isinstance(est, bool) or not isinstance(est, int) or est < 0:
        raise InvalidTaskError(f"Seed entry {task_id!r} has an invalid estimated_time")

    due_raw = item.get("due_date")
    if not isinstance(due_raw, str):
        raise InvalidTaskError(f"Seed entry {task_id!r} has no due_date")

    description = item.get("description")
    if description is not None and not isinstance(description, str):
        raise InvalidTaskError(f"Seed entry {task_id!r} has a non-string description")

    return Task(
        id=task_id,
        title=title,
        description=description,
        due_date=parse_due_date(due_raw),
        priority=Priority.parse(item.get("priority", Priority.MEDIUM)),
        status=TaskStatus.parse(item.get("status", TaskStatus.PENDING)),
        estimated_time=est,
    )


def load_seed_tasks(path: str | Path | None) -> list[Task]:
    """
    Read initial tasks from a JSON list (best-effort).

    A missing or malformed file is logged and yields no tasks; the store
    itself still rejects duplicate ids.
    """
    if not path:
        return []
    path = Path(path)
    if not path.exists():
        logger.warning("Seed file %s does not exist; starting empty.", path)
        return []
    try:
        data = json.loads(path.read_text("utf-8"))
        if not isinstance(data, list):
            raise InvalidTaskError("Seed file must contain a JSON list")
        tasks = [_task_from_seed(item) for item in data]
    except (OSError, ValueError):
        # InvalidTaskError and json.JSONDecodeError are both ValueErrors.
        logger.exception("Failed to load seed tasks from %s", path)
        return []
    logger.info("Loaded %d seed tasks from %s", len(tasks), path)
    return tasks


def create_task_store(settings, *, on_status_change: StatusObserver | None = None) -> TaskStore:
    return TaskStore(
        load_seed_tasks(getattr(settings, "seed_path", None)),
        on_status_change=on_status_change or log_status_change,
        strict=bool(getattr(settings, "strict_status", False)),
    )


def create_initial_state(
    *,
    settings=None,
    on_status_change: StatusObserver | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=create_task_store(settings, on_status_change=on_status_change),
    )
