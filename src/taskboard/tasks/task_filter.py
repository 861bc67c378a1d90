# src/taskboard/tasks/task_filter.py

"""
Priority + text filtering over a task sequence.

Pure functions: no caching, no mutation of the input, order preserved.
Cheap enough to run on every keystroke.
"""

from __future__ import annotations

from collections.abc import Iterable

from .task_models import ALL_PRIORITIES, Priority, PrioritySelector, Task


def parse_priority_selector(raw: str | None) -> PrioritySelector:
    """Map user text ("all", "*", "", or a priority name) to a selector."""
    if raw is None:
        return ALL_PRIORITIES
    text = raw.strip().lower()
    if text in ("", "*", ALL_PRIORITIES):
        return ALL_PRIORITIES
    return Priority.parse(text)


def matches_priority(task: Task, priority: PrioritySelector | str) -> bool:
    return priority == ALL_PRIORITIES or task.priority == priority


def matches_search(task: Task, search_text: str) -> bool:
    # Case-sensitive, unanchored substring match on title or description.
    if search_text == "":
        return True
    if search_text in task.title:
        return True
    return task.description is not None and search_text in task.description


def filter_tasks(
    tasks: Iterable[Task],
    priority: PrioritySelector | str = ALL_PRIORITIES,
    search_text: str = "",
) -> list[Task]:
    """Return a new list of the tasks passing both selectors, in input order."""
    return [t for t in tasks if matches_priority(t, priority) and matches_search(t, search_text)]
