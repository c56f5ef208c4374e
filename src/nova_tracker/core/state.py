# src/nova_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from .errors import TaskParseError


@dataclass
class AppState:
    # Settings are kept on the state so connectors can read app_name etc.
    settings: object

    tasks: TaskList
    store: TaskStore

    # Lines dropped by the last load; reported once at startup.
    load_errors: list[TaskParseError] = field(default_factory=list)
