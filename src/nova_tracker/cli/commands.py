# src/nova_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.errors import CommandError, ErrorKind
from ..core.operations import (
    AddTask,
    Exit,
    ListTasks,
    Operation,
    RemoveTask,
    SearchTasks,
    SetDone,
)
from ..tasks.task_models import BY_PREFIX, FROM_PREFIX, TO_PREFIX, Deadline, Event, Todo

CommandParser = Callable[[str], Operation]

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class CommandRegistry:
    """Keyword -> argument parser table used to turn a line into an Operation."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}

    def register(self, name: str, parser: CommandParser) -> None:
        self._parsers[name] = parser

    def names(self) -> list[str]:
        return list(self._parsers)

    def parse(self, line: str) -> Operation:
        """
        Split "keyword rest" on the first whitespace run and hand `rest` to
        the keyword's parser. Keywords are case-sensitive.
        """
        parts = line.strip().split(maxsplit=1)
        keyword = parts[0] if parts else ""
        rest = parts[1] if len(parts) > 1 else ""

        parser = self._parsers.get(keyword)
        if parser is None:
            raise CommandError(
                ErrorKind.UNKNOWN_COMMAND,
                f"Unknown command! Available commands: {', '.join(self.names())}.",
            )

        op = parser(rest)
        logger.debug("Parsed %r -> %r", keyword, op)
        return op


def _require_description(rest: str, example: str) -> None:
    if not rest.strip():
        raise CommandError(ErrorKind.EMPTY_DESCRIPTION, example)


def _split_once(body: str, delimiter: str, usage: str) -> tuple[str, str]:
    head, sep, tail = body.partition(f" {delimiter} ")
    if not sep:
        raise CommandError(ErrorKind.FORMAT_ERROR, f"Invalid format! Use '{usage}'.")
    return head.strip(), tail.strip()


def _parse_task_number(rest: str, usage: str) -> int:
    """First token of `rest` as a 1-based number, returned 0-based."""
    tokens = rest.split()
    if not tokens or not _NUMBER_RE.fullmatch(tokens[0]):
        raise CommandError(ErrorKind.FORMAT_ERROR, f"Invalid input format. Use: {usage}")
    return int(tokens[0]) - 1


def parse_list(rest: str) -> Operation:
    return ListTasks()


def parse_mark(rest: str) -> Operation:
    return SetDone(index=_parse_task_number(rest, "mark [number] or unmark [number]"), done=True)


def parse_unmark(rest: str) -> Operation:
    return SetDone(index=_parse_task_number(rest, "mark [number] or unmark [number]"), done=False)


def parse_todo(rest: str) -> Operation:
    _require_description(
        rest, "The description of a todo cannot be empty. Example: 'todo Buy groceries'."
    )
    return AddTask(Todo(rest))


def parse_deadline(rest: str) -> Operation:
    _require_description(
        rest,
        "The description of a deadline cannot be empty. "
        "Example: 'deadline Buy groceries /by 2024-12-24'.",
    )
    description, by = _split_once(rest, "/by", "deadline [task] /by [date]")
    return AddTask(Deadline(description, BY_PREFIX + by))


def parse_event(rest: str) -> Operation:
    _require_description(
        rest,
        "The description of an event cannot be empty. "
        "Example: 'event Project meeting /from 2024-12-24 14:00 /to 2024-12-24 16:00'.",
    )
    usage = "event [task] /from [start] /to [end]"
    description, times = _split_once(rest, "/from", usage)
    start, end = _split_once(times, "/to", usage)
    return AddTask(Event(description, FROM_PREFIX + start, TO_PREFIX + end))


def parse_delete(rest: str) -> Operation:
    return RemoveTask(index=_parse_task_number(rest, "delete [number]"))


def parse_find(rest: str) -> Operation:
    keyword = rest.strip()
    if not keyword:
        raise CommandError(
            ErrorKind.EMPTY_KEYWORD, "The keyword to find cannot be empty. Example: 'find book'."
        )
    return SearchTasks(keyword=keyword.casefold())


def parse_bye(rest: str) -> Operation:
    return Exit()


registry = CommandRegistry()

registry.register("list", parse_list)
registry.register("mark", parse_mark)
registry.register("unmark", parse_unmark)
registry.register("todo", parse_todo)
registry.register("deadline", parse_deadline)
registry.register("event", parse_event)
registry.register("delete", parse_delete)
registry.register("find", parse_find)
registry.register("bye", parse_bye)


def parse_command(line: str) -> Operation:
    """Turn one input line into an Operation, or raise CommandError."""
    return registry.parse(line)
