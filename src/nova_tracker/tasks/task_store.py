# src/nova_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import StorageError, TaskParseError
from ..core.ports import FileStore
from .task_list import TaskList
from .task_models import (
    BY_PREFIX,
    FROM_PREFIX,
    TO_PREFIX,
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
)

logger = logging.getLogger(__name__)

FIELD_SEP = " | "

# Number of '|'-separated fields each type code must have on disk.
_ARITY: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def _strip_prefix(value: str, prefix: str) -> str:
    if value.startswith(prefix):
        value = value[len(prefix):]
    return value.strip()


def encode_task(task: Task) -> str:
    """One task -> one line (without newline), e.g. ``D | 0 | Submit report | 2024-12-01``."""
    fields = [task.kind.value, "1" if task.done else "0", task.description]
    match task.kind:
        case TaskKind.DEADLINE:
            fields.append(_strip_prefix(task.by, BY_PREFIX))
        case TaskKind.EVENT:
            fields.append(_strip_prefix(task.start, FROM_PREFIX))
            fields.append(_strip_prefix(task.end, TO_PREFIX))
    return FIELD_SEP.join(fields)


def decode_task(line: str, line_no: int | None = None) -> Task:
    """
    One stored line -> Task.

    Splits on the bare '|' (not the padded separator) and trims every field.
    Raises TaskParseError on an unknown type code or a wrong field count.
    """
    parts = [p.strip() for p in line.split("|")]
    try:
        kind = TaskKind(parts[0])
    except ValueError:
        raise TaskParseError(
            f"Unknown task type {parts[0]!r} in file.", line_no=line_no, line=line
        ) from None

    expected = _ARITY[kind]
    if len(parts) != expected:
        raise TaskParseError(
            f"Invalid {kind.name.lower()} format in file: expected {expected} fields, got {len(parts)}.",
            line_no=line_no,
            line=line,
        )

    done = parts[1] == "1"
    description = parts[2]

    task: Task
    if kind is TaskKind.DEADLINE:
        task = Deadline(description, BY_PREFIX + parts[3], done=done)
    elif kind is TaskKind.EVENT:
        task = Event(description, FROM_PREFIX + parts[3], TO_PREFIX + parts[4], done=done)
    else:
        task = Todo(description, done=done)
    return task


def encode_tasks(tasks: TaskList) -> str:
    return "".join(encode_task(t) + "\n" for t in tasks)


@dataclass(slots=True)
class LoadResult:
    tasks: TaskList
    errors: list[TaskParseError] = field(default_factory=list)


def decode_tasks(text: str) -> LoadResult:
    """
    Decode a whole file. Bad lines are skipped and collected, never fatal.
    Blank lines are ignored.
    """
    result = LoadResult(tasks=TaskList())
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            result.tasks.add(decode_task(line, line_no))
        except TaskParseError as e:
            logger.warning("Skipping line %d of tasks file: %s (%r)", line_no, e.message, line)
            result.errors.append(e)
    return result


class TaskStore:
    """
    Line-oriented task file.

    The whole collection is rewritten on every save; there is no append mode.
    All I/O goes through the FileStore port.
    """

    def __init__(self, files: FileStore, path: str | Path) -> None:
        self._files = files
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_dir(self) -> None:
        try:
            self._files.ensure_dir(self._path.parent)
        except OSError as e:
            raise StorageError(f"Cannot create directory {self._path.parent}: {e}") from e

    def load(self) -> LoadResult:
        self._ensure_dir()
        try:
            text = self._files.read_text(self._path)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Error loading tasks: {e}") from e

        if text is None:
            logger.info("No tasks file at %s, starting empty.", self._path)
            return LoadResult(tasks=TaskList())

        result = decode_tasks(text)
        logger.info(
            "TaskStore loaded path=%s tasks=%d skipped=%d",
            self._path,
            len(result.tasks),
            len(result.errors),
        )
        return result

    def save(self, tasks: TaskList) -> None:
        self._ensure_dir()
        try:
            self._files.write_text(self._path, encode_tasks(tasks))
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise StorageError(f"Error saving tasks: {e}") from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
