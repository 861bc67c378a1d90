# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_models import Priority, Task
from taskboard.tasks.task_store import TaskStore

from .fakes import RecordingObserver, make_task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        seed_path=None,
        strict_status=False,
        console_enabled=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        make_task("a", "Write report", priority=Priority.HIGH),
        make_task("b", "Clean desk", priority=Priority.LOW),
    ]


@pytest.fixture()
def store(sample_tasks: list[Task], observer: RecordingObserver) -> TaskStore:
    return TaskStore(sample_tasks, on_status_change=observer)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real in-memory TaskStore seeded with two tasks."""
    return AppState(settings=settings, task_store=store)
