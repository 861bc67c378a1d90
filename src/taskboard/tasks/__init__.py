# src/taskboard/tasks/__init__.py

from .errors import InvalidTaskError, TaskError, TaskNotFoundError
from .task_filter import filter_tasks, parse_priority_selector
from .task_models import ALL_PRIORITIES, NewTask, Priority, PrioritySelector, Task, TaskStatus
from .task_store import TaskStore

__all__ = [
    "ALL_PRIORITIES",
    "InvalidTaskError",
    "NewTask",
    "Priority",
    "PrioritySelector",
    "Task",
    "TaskError",
    "TaskNotFoundError",
    "TaskStatus",
    "TaskStore",
    "filter_tasks",
    "parse_priority_selector",
]
