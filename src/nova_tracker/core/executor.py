# src/nova_tracker/core/executor.py

"""
Apply one operation to the task list.

No I/O happens here: the caller gets back the result plus a flag saying
whether the collection changed and must be persisted.
"""

from __future__ import annotations

import logging

from ..tasks.task_list import TaskList
from .operations import (
    Added,
    AddTask,
    Exit,
    Farewell,
    Found,
    Listed,
    ListTasks,
    Marked,
    Operation,
    Removed,
    RemoveTask,
    Result,
    SearchTasks,
    SetDone,
)

logger = logging.getLogger(__name__)


def apply(tasks: TaskList, op: Operation) -> tuple[Result, bool]:
    """
    Returns (result, persist).

    Raises CommandError (IndexOutOfRange) before touching the list if an
    index is invalid, so a failed operation never leaves a partial mutation.
    """
    match op:
        case AddTask(task=task):
            tasks.add(task)
            logger.debug("Added %s task at position %d", task.kind.value, len(tasks))
            return Added(task=task, size=len(tasks)), True

        case SetDone(index=index, done=done):
            task = tasks.get(index)
            task.done = done
            logger.debug("Set done=%s on task %d", done, index + 1)
            return Marked(task=task, done=done, size=len(tasks)), True

        case RemoveTask(index=index):
            task = tasks.pop(index)
            logger.debug("Removed task %d", index + 1)
            return Removed(task=task, size=len(tasks)), True

        case ListTasks():
            return Listed(tasks=tasks.snapshot()), False

        case SearchTasks(keyword=keyword):
            return Found(keyword=keyword, tasks=tasks.find(keyword)), False

        case Exit():
            return Farewell(), False

    raise TypeError(f"Unsupported operation: {op!r}")
