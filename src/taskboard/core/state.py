# src/taskboard/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import ALL_PRIORITIES, PrioritySelector
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them.
    settings: Any

    task_store: TaskRepo

    # Active selectors of the presentation layer.
    priority: PrioritySelector = ALL_PRIORITIES
    search_text: str = ""

    lock: threading.RLock = field(default_factory=threading.RLock)
