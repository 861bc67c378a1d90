# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) between the task core and its presentation layer.

The console and tests depend on these Protocols rather than on TaskStore,
so an alternative store (or a fake) can be dropped in.
"""

from typing import Protocol

from ..tasks.task_models import NewTask, Task, TaskStatus


class StatusObserver(Protocol):
    """Called once after every successful status update."""
    def __call__(self, task_id: str, new_status: TaskStatus) -> None: ...


class TaskRepo(Protocol):
    def create(self, new_task: NewTask) -> str: ...
    def set_status(self, task_id: str, new_status: TaskStatus | str) -> bool: ...
    def get_task(self, task_id: str) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...
