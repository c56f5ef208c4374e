# src/nova_tracker/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import CommandError, ErrorKind
from .task_models import Task


class TaskList:
    """
    Ordered, mutable task collection.

    Position is the only identity a task has: indexes are 0-based here and
    1-based in every message shown to the user. Removal shifts later tasks down.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def snapshot(self) -> list[Task]:
        return list(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise CommandError(
                ErrorKind.INDEX_OUT_OF_RANGE,
                f"Invalid task number. Enter a number between 1 and {len(self._tasks)}.",
            )

    def get(self, index: int) -> Task:
        self.check_index(index)
        return self._tasks[index]

    def pop(self, index: int) -> Task:
        self.check_index(index)
        return self._tasks.pop(index)

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains `keyword`, ignoring case, in list order."""
        needle = keyword.casefold()
        return [t for t in self._tasks if needle in t.description.casefold()]
