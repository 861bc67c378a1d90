# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date

from .errors import InvalidTaskError, TaskNotFoundError
from .task_models import NewTask, Priority, Task, TaskStatus

logger = logging.getLogger(__name__)

StatusCallback = Callable[[str, TaskStatus], None]
IdFactory = Callable[[], str]

MAX_ID_ATTEMPTS = 16


def _default_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    """
    In-memory, insertion-ordered task store.

    The store is the only writer of its collection:
    - tasks are kept in a dict keyed by id (dict order == insertion order)
    - a status update replaces the record under the same key, so order is kept
    - ids are never reused, even for ids that only appeared in the seed

    Thread-safety:
    - mutations and snapshot reads are serialized by one re-entrant lock
    - list_tasks() returns a fresh list of immutable Task records
    """

    def __init__(
        self,
        initial_tasks: Iterable[Task] | None = None,
        *,
        on_status_change: StatusCallback | None = None,
        id_factory: IdFactory | None = None,
        strict: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._tasks: dict[str, Task] = {}
        self._issued_ids: set[str] = set()
        self._on_status_change = on_status_change
        self._id_factory = id_factory or _default_id
        self._strict = strict

        for task in initial_tasks or ():
            task = self._checked_seed(task)
            if task.id in self._tasks:
                raise InvalidTaskError(f"Duplicate task id in initial tasks: {task.id!r}")
            self._tasks[task.id] = task
            self._issued_ids.add(task.id)

        logger.info("TaskStore ready total=%s strict=%s", len(self._tasks), strict)

    # ---- low-level helpers ----

    def _next_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = str(self._id_factory())
            if candidate and candidate not in self._issued_ids:
                return candidate
            logger.warning("Task id collision on %r, regenerating.", candidate)
        raise RuntimeError(f"Could not generate a unique task id after {MAX_ID_ATTEMPTS} attempts")

    @staticmethod
    def _check_fields(
        *,
        title: object,
        description: object,
        estimated_time: object,
        due_date: object,
        priority: object,
    ) -> Priority:
        """Shared checks for created and seeded tasks; returns the parsed priority."""
        if not isinstance(title, str) or not title.strip():
            raise InvalidTaskError("title is required")

        if description is not None and not isinstance(description, str):
            raise InvalidTaskError("description must be a string or None")

        if isinstance(estimated_time, bool) or not isinstance(estimated_time, int):
            raise InvalidTaskError("estimated_time must be an integer number of minutes")
        if estimated_time < 0:
            raise InvalidTaskError("estimated_time must be >= 0")

        # datetime is a subclass of date, so both are accepted here.
        if not isinstance(due_date, date):
            raise InvalidTaskError("due_date must be a date or datetime")

        return Priority.parse(priority)  # type: ignore[arg-type]

    @classmethod
    def _validate(cls, new_task: NewTask) -> Priority:
        return cls._check_fields(
            title=new_task.title,
            description=new_task.description,
            estimated_time=new_task.estimated_time,
            due_date=new_task.due_date,
            priority=new_task.priority,
        )

    @classmethod
    def _checked_seed(cls, task: Task) -> Task:
        """
        Seed tasks go through the same checks as create().

        Raw enum strings ("low", "in-progress") are converted to enum members,
        so every stored task holds a Priority and a TaskStatus.
        """
        if not isinstance(task.id, str) or not task.id:
            raise InvalidTaskError(f"Initial task id must be a non-empty string, got {task.id!r}")
        try:
            priority = cls._check_fields(
                title=task.title,
                description=task.description,
                estimated_time=task.estimated_time,
                due_date=task.due_date,
                priority=task.priority,
            )
            status = TaskStatus.parse(task.status)
        except InvalidTaskError as e:
            raise InvalidTaskError(f"Initial task {task.id!r}: {e}") from e
        return replace(task, priority=priority, status=status)

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        with self._lock:
            return self._tasks.get(task_id)

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return list(self._tasks.values())

    def create(self, new_task: NewTask) -> str:
        """
        Validate `new_task`, append it as a pending Task and return its id.

        Nothing is stored when validation fails.
        """
        priority = self._validate(new_task)

        with self._lock:
            task_id = self._next_id()
            task = Task(
                id=task_id,
                title=new_task.title,
                description=new_task.description,
                due_date=new_task.due_date,
                priority=priority,
                status=TaskStatus.PENDING,
                estimated_time=new_task.estimated_time,
            )
            self._tasks[task_id] = task
            self._issued_ids.add(task_id)

        logger.debug(
            "Task created id=%s priority=%s due=%s est=%s",
            task_id,
            priority,
            task.due_date,
            task.estimated_time,
        )
        return task_id

    def set_status(self, task_id: str, new_status: TaskStatus | str) -> bool:
        """
        Overwrite the status of `task_id`; every transition is allowed.

        Returns True when the task exists. Unknown ids are ignored (False),
        or raise TaskNotFoundError when the store was built with strict=True.
        The observer is called once, after the update, only for known ids.
        It runs while the store lock is held, so notifications arrive in the
        same order as the writes; it may call back into the store (RLock).
        """
        status = TaskStatus.parse(new_status)

        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                if self._strict:
                    raise TaskNotFoundError(task_id)
                logger.debug("set_status ignored: unknown task id=%s", task_id)
                return False
            self._tasks[task_id] = task.with_status(status)
            logger.debug("Task status id=%s %s -> %s", task_id, task.status, status)

            if self._on_status_change is not None:
                self._on_status_change(task_id, status)
        return True
