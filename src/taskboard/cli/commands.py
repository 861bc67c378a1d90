# src/taskboard/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections import Counter
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import (
    QUICK_ACTIONS,
    add_task,
    available_actions,
    change_status,
    format_task,
    resolve_task_id,
    visible_tasks,
)
from ..tasks.task_filter import parse_priority_selector
from ..tasks.task_models import ALL_PRIORITIES, TaskStatus

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _selectors_line(state: AppState) -> str:
    search = repr(state.search_text) if state.search_text else "(none)"
    return f"priority={state.priority}, search={search}"


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add <title>; priority=high; due=2026-10-20; est=30; desc=...
    """
    if not args:
        return "Usage: /add <title>; priority=low|medium|high; due=YYYY-MM-DD; est=<minutes>; desc=<text>"
    task_id = add_task(state, " ".join(args))
    task = state.task_store.get_task(task_id)
    return f"Added: {format_task(task)}" if task else f"Added task {task_id}."


def cmd_list(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    tasks = visible_tasks(state)
    if not tasks:
        return f"No tasks match ({_selectors_line(state)})."
    lines = [f"Tasks ({len(tasks)} shown, {_selectors_line(state)}):"]
    for i, task in enumerate(tasks, start=1):
        actions = ", ".join(available_actions(task)) or "-"
        lines.append(f"{i}. {format_task(task)}  actions: {actions}")
    return "\n".join(lines)


def cmd_show(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /show <id>"
    task = state.task_store.get_task(resolve_task_id(state, args[0]))
    if task is None:
        return f"No task with id {args[0]!r}."
    lines = [
        f"Id: {task.id}",
        f"Title: {task.title}",
        f"Description: {task.description or '-'}",
        f"Status: {task.status.value}",
        f"Priority: {task.priority.value}",
        f"Due: {task.due_date.isoformat()}",
        f"Estimated time: {task.estimated_time} min",
        f"Actions: {', '.join(available_actions(task)) or '-'}",
    ]
    return "\n".join(lines)


def _quick_action(action: str) -> CommandHandler3:
    status = QUICK_ACTIONS[action]

    def handler(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
        if not args:
            return f"Usage: /{action} <id>"
        task = change_status(state, args[0], status)
        return f"Updated: {format_task(task)}"

    return handler


def cmd_set(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /set <id> <status>  -> any status, from any status
    """
    if len(args) < 2:
        allowed = " | ".join(s.value for s in TaskStatus)
        return f"Usage: /set <id> <{allowed}>"
    task = change_status(state, args[0], TaskStatus.parse(args[1]))
    return f"Updated: {format_task(task)}"


def cmd_priority(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /priority             -> show current selector
    /priority high        -> only high-priority tasks
    /priority all         -> every priority
    """
    if not args:
        return f"Priority filter: {state.priority}"
    state.priority = parse_priority_selector(args[0])
    return f"Priority filter set to {state.priority}."


def cmd_search(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /search <text>  -> case-sensitive substring filter on title/description
    /search         -> clear the search text
    """
    state.search_text = " ".join(args)
    if not state.search_text:
        return "Search cleared."
    return f"Searching for {state.search_text!r}."


def cmd_clear(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    state.priority = ALL_PRIORITIES
    state.search_text = ""
    return "Filters cleared."


def cmd_stats(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    tasks = state.task_store.list_tasks()
    by_status = Counter(t.status for t in tasks)
    lines = [f"Total tasks: {len(tasks)}"]
    for status in TaskStatus:
        lines.append(f"  {status.value}: {by_status.get(status, 0)}")
    open_minutes = sum(
        t.estimated_time for t in tasks if t.status in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS)
    )
    lines.append(f"Open estimated time: {open_minutes} min")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title>; priority=high; due=2026-10-20; est=30; desc=..."
)
registry.register("list", cmd_list, help_text="List tasks matching the current filters.", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("done", _quick_action("complete"), help_text="Mark a task completed.", aliases=["complete"])
registry.register("start", _quick_action("start"), help_text="Mark a task in progress.")
registry.register("cancel", _quick_action("cancel"), help_text="Cancel a task.")
registry.register("set", cmd_set, help_text="Set any status: /set <id> <status>.")
registry.register(
    "priority", cmd_priority, help_text="Filter by priority: /priority all|low|medium|high."
)
registry.register("search", cmd_search, help_text="Filter by text: /search <text> (empty clears).")
registry.register("clear", cmd_clear, help_text="Reset priority and search filters.")
registry.register("stats", cmd_stats, help_text="Show task counts per status.")
