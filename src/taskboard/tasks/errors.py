# src/taskboard/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task board errors surfaced to callers."""


class InvalidTaskError(TaskError, ValueError):
    """Malformed task input (blank title, negative estimate, bad date, unknown enum value)."""


class TaskNotFoundError(TaskError, LookupError):
    """Raised by a strict TaskStore when a status update targets an unknown id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"No task with id {task_id!r}")
        self.task_id = task_id
