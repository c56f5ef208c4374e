# src/nova_tracker/core/operations.py

"""
Operations (what one command line asks for) and their results.

Both are closed sets of small frozen dataclasses; the executor and the
renderer dispatch on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task


# ---- operations ----


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class SetDone:
    index: int  # 0-based
    done: bool


@dataclass(frozen=True, slots=True)
class AddTask:
    task: Task


@dataclass(frozen=True, slots=True)
class RemoveTask:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class SearchTasks:
    keyword: str  # already case-folded


@dataclass(frozen=True, slots=True)
class Exit:
    pass


Operation = ListTasks | SetDone | AddTask | RemoveTask | SearchTasks | Exit


# ---- results ----


@dataclass(frozen=True, slots=True)
class Listed:
    tasks: list[Task] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Marked:
    task: Task
    done: bool
    size: int


@dataclass(frozen=True, slots=True)
class Added:
    task: Task
    size: int


@dataclass(frozen=True, slots=True)
class Removed:
    task: Task
    size: int


@dataclass(frozen=True, slots=True)
class Found:
    keyword: str
    tasks: list[Task] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Farewell:
    pass


Result = Listed | Marked | Added | Removed | Found | Farewell
