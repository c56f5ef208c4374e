# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

# In-memory values of the extra fields carry these tags; the file format does not.
BY_PREFIX = "by: "
FROM_PREFIX = "from: "
TO_PREFIX = "to: "


class TaskKind(StrEnum):
    """
    Task variant tag.

    The values double as the type code in the first column of the tasks file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Todo:
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    done: bool = False


@dataclass(slots=True)
class Deadline:
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    by: str  # e.g. "by: 2024-12-01"
    done: bool = False


@dataclass(slots=True)
class Event:
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    start: str  # e.g. "from: Mon 10am"
    end: str  # e.g. "to: Mon 11am"
    done: bool = False


Task = Todo | Deadline | Event


def format_task(task: Task) -> str:
    """Render one task the way list/find/add replies show it, e.g. ``[D][X] report (by: Fri)``."""
    head = f"[{task.kind.value}][{'X' if task.done else ' '}] {task.description}"
    match task.kind:
        case TaskKind.DEADLINE:
            return f"{head} ({task.by})"
        case TaskKind.EVENT:
            return f"{head} ({task.start} {task.end})"
        case _:
            return head
